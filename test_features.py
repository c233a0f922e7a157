"""
Tests for text normalization, boolean detectors, section titles, term
frequency and document metadata.
"""

from dceclass.extract.normalize import fold, normalize_text
from dceclass.features import signals
from dceclass.features.extractor import ClassificationFeatures, extract_features
from dceclass.features.metadata import (
    build_metadata,
    content_density,
    detect_language,
    estimate_page_count,
    structure_score,
)
from dceclass.features.sections import extract_section_titles
from dceclass.features.terms import has_consultation_terms, has_numeric_data, term_frequency


# ── Normalization ─────────────────────────────────────────────────────────

def test_fold_removes_accents_and_case():
    assert fold("Responsabilité") == "responsabilite"
    assert fold("RÈGLEMENT DE CONSULTATION") == "reglement de consultation"


def test_fold_maps_typographic_apostrophe():
    assert fold("délais d’exécution") == "delais d'execution"


def test_normalize_keeps_raw_and_stripped_lines():
    doc = normalize_text("  Titre un  \n\n  Deuxième ligne \n")
    assert doc.raw == "  Titre un  \n\n  Deuxième ligne \n"
    assert doc.lines == ["Titre un", "Deuxième ligne"]
    assert "deuxieme" in doc.text


def test_normalize_blank():
    assert normalize_text("").is_blank
    assert normalize_text(" \n\t ").is_blank


# ── Boolean detectors ─────────────────────────────────────────────────────

def test_table_of_contents():
    assert signals.has_table_of_contents(fold("Sommaire"))
    assert signals.has_table_of_contents(fold("TABLE DES MATIÈRES"))
    assert not signals.has_table_of_contents(fold("Objet du marché"))


def test_price_schedule_needs_three_cues():
    assert not signals.has_price_schedule(fold("prix unitaire, montant"))
    assert signals.has_price_schedule(fold("prix unitaire, montant TTC"))


def test_price_schedule_counts_distinct_cues_not_repetitions():
    assert not signals.has_price_schedule(fold("montant montant montant"))


def test_legal_clauses_need_four_cues():
    assert not signals.has_legal_clauses(fold("article clause alinéa"))
    assert signals.has_legal_clauses(fold("article clause alinéa paragraphe"))


def test_legal_clauses_match_unaccented_text():
    text = fold("article clause obligations responsabilite")
    assert signals.has_legal_clauses(text)


def test_technical_specs_need_three_cues():
    assert not signals.has_technical_specs(fold("norme standard"))
    assert signals.has_technical_specs(fold("norme standard équipement"))


def test_article_numbers():
    assert signals.count_article_numbers(fold("article 1, article 2")) == 2
    assert not signals.has_article_numbers(fold("article 1, article 2"))
    assert signals.has_article_numbers(fold("article 1, article 2, art. 3"))
    assert signals.has_article_numbers(fold("1.1 puis 2.3 puis 4.5"))


def test_performance_requirements_with_accents():
    assert not signals.has_performance_requirements(fold("rendement"))
    assert signals.has_performance_requirements(fold("rendement et débit"))


# ── Section titles ────────────────────────────────────────────────────────

def test_section_titles_filtering():
    lines = [
        "1 Objet du marché",
        "Ceci est une phrase.",
        "court",
        "ARTICLE 2 - DURÉE DU MARCHÉ",
        "minuscule au début du titre",
        "Écrit avec accent initial",
        "Est-ce une question?",
    ]
    assert extract_section_titles(lines) == [
        "1 Objet du marché",
        "ARTICLE 2 - DURÉE DU MARCHÉ",
        "Écrit avec accent initial",
    ]


def test_section_titles_length_bounds():
    assert extract_section_titles(["Abcdefghi"]) == []          # 9 chars
    assert extract_section_titles(["Abcdefghij"]) == []         # 10 chars, bound is exclusive
    assert extract_section_titles(["Abcdefghijk"]) == ["Abcdefghijk"]
    assert extract_section_titles(["A" * 100]) == []


def test_section_titles_capped_in_source_order():
    lines = [f"Section numero {i} du document" for i in range(30)]
    titles = extract_section_titles(lines)
    assert len(titles) == 20
    assert titles[0] == "Section numero 0 du document"
    assert titles[-1] == "Section numero 19 du document"


# ── Term frequency ────────────────────────────────────────────────────────

def test_term_frequency_ties_keep_first_seen_order():
    tf = term_frequency("alpha beta gamma beta alpha delta")
    assert list(tf.items()) == [("alpha", 2), ("beta", 2), ("gamma", 1), ("delta", 1)]


def test_term_frequency_drops_short_words():
    assert term_frequency("les de prix du lot") == {"prix": 1}


def test_term_frequency_top_fifty():
    text = " ".join(f"terme{i:02d}" for i in range(60)) + " terme59"
    tf = term_frequency(text)
    assert len(tf) == 50
    assert next(iter(tf)) == "terme59"
    assert "terme00" in tf
    assert "terme55" not in tf


def test_numeric_data_and_consultation_terms():
    assert has_numeric_data(["1250", "3400", "prix", "montant", "tarif"])
    assert not has_numeric_data(["1250", "prix", "lot"])
    assert has_consultation_terms(["candidatures", "offres", "consultation"])
    assert not has_consultation_terms(["candidatures", "offres"])


# ── Extractor ─────────────────────────────────────────────────────────────

def test_extract_features_empty():
    f = extract_features("")
    assert f.fired() == []
    assert f.section_titles == []
    assert f.key_term_frequency == {}


def test_extract_features_cctp(cctp_text):
    f = extract_features(cctp_text)
    assert f.has_technical_specs
    assert f.has_performance_requirements
    assert f.has_article_numbers
    assert f.has_table_of_contents
    assert not f.has_price_schedule
    assert "Article 1 - Objet du marché" in f.section_titles


def test_extract_features_accepts_normalized_text(bpu_text):
    assert extract_features(normalize_text(bpu_text)) == extract_features(bpu_text)


def test_features_to_dict_uses_boundary_names(bpu_text):
    data = extract_features(bpu_text).to_dict()
    assert data["hasPriceSchedule"] is True
    assert isinstance(data["sectionTitles"], list)


# ── Metadata ──────────────────────────────────────────────────────────────

def test_detect_language():
    assert detect_language("le marché est attribué pour la durée du contrat") == "fr"
    assert detect_language("the quick brown fox jumps over the lazy dog") == "unknown"
    assert detect_language("") == "unknown"


def test_estimate_page_count():
    assert estimate_page_count("mot " * 1200, 250_000) == 3
    assert estimate_page_count("mot " * 600, 0) == 1
    # (1 + 4) / 2 = 2.5 rounds up
    assert estimate_page_count("mot " * 500, 350_000) == 3
    assert estimate_page_count("", 0) == 1


def test_structure_score():
    assert structure_score(ClassificationFeatures()) == 0.0
    f = ClassificationFeatures(
        has_table_of_contents=True,
        has_article_numbers=True,
        section_titles=[f"Titre numero {i}" for i in range(11)],
    )
    assert structure_score(f) == 1.0
    f = ClassificationFeatures(section_titles=[f"Titre numero {i}" for i in range(6)])
    assert structure_score(f) == 0.3


def test_content_density():
    assert content_density("") == 0.0
    assert content_density("   ") == 0.0
    assert content_density("abcd efgh") == 0.45
    assert content_density("x" * 200) == 1.0


def test_build_metadata(rc_text):
    meta = build_metadata(rc_text, 60_000, extract_features(rc_text))
    assert meta.language == "fr"
    assert meta.page_estimate == 1
    assert set(meta.to_dict()) == {"language", "pageEstimate", "structureScore", "contentDensity"}
