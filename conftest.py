"""
Shared sample documents for the test suite.

The samples are short, realistic excerpts of the four DCE document types plus
edge cases. Expected outcomes are asserted in the individual test modules.
"""

import pytest


CCTP_TEXT = """CAHIER DES CLAUSES TECHNIQUES PARTICULIÈRES (CCTP)
Sommaire
Article 1 - Objet du marché
Article 2 - Consistance des travaux
Article 3 - Matériaux et fournitures
3.1 Caractéristiques techniques des équipements
3.2 Performances requises
Les matériaux doivent respecter la norme NF EN 206 et le standard technique applicable.
La résistance et le rendement des équipements seront vérifiés.
Article 4 - Contrôles et essais
Les spécifications techniques précisent les méthodes d'exécution.
"""

CCP_TEXT = """CAHIER DES CLAUSES PARTICULIERES
Article 12 - Pénalités
article 12 article 12 article 12 article 12
clause obligations responsabilité dispositions
Conditions particulières et délais d’exécution
Réception des travaux et garanties
"""

BPU_TEXT = """BORDEREAU DES PRIX UNITAIRES
Bordereau des prix unitaires - lot 2
Désignation des prestations
Unité de mesure et quantités estimatives
prix unitaire HT : montant selon tarif
1250 3400 5600 7800 9100 2300
"""

RC_TEXT = """RÈGLEMENT DE CONSULTATION
Article 1 - Objet de la consultation
Article 2 - Constitution du dossier de candidature
Article 3 - Critères de jugement des offres
Les candidatures et les offres seront analysées selon les critères d'attribution.
Calendrier de consultation et remise des offres
Renseignements complémentaires
"""

# Weak, balanced evidence for particular clauses and consultation rules.
CLOSE_RACE_TEXT = """cahier des clauses particulières
conditions particulières
pénalités
garanties
règlement de consultation
remise des offres
critères de sélection
candidatures
"""


@pytest.fixture
def cctp_text():
    return CCTP_TEXT


@pytest.fixture
def ccp_text():
    return CCP_TEXT


@pytest.fixture
def bpu_text():
    return BPU_TEXT


@pytest.fixture
def rc_text():
    return RC_TEXT


@pytest.fixture
def close_race_text():
    return CLOSE_RACE_TEXT


@pytest.fixture
def sample_corpus():
    return [
        ("cctp.pdf", CCTP_TEXT, 120_000),
        ("ccp.pdf", CCP_TEXT, 80_000),
        ("bpu.pdf", BPU_TEXT, 40_000),
        ("rc.pdf", RC_TEXT, 60_000),
        ("close.pdf", CLOSE_RACE_TEXT, 10_000),
        ("empty.pdf", "", 0),
        ("blank.pdf", "   \n\t  ", 5),
        ("english.pdf", "The quick brown fox jumps over the lazy dog.", 1_000),
    ]
