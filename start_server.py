#!/usr/bin/env python3
"""
Python-based startup script for the DCE Classifier API.
"""

import os
import sys
import subprocess

from dotenv import load_dotenv


def build_command(host: str, port: int, workers: int) -> list:
    """Build the uvicorn command line; a single worker runs with --reload."""
    cmd = [
        sys.executable, "-m", "uvicorn",
        "app:app",
        "--host", host,
        "--port", str(port),
    ]

    if workers == 1:
        cmd.append("--reload")
    else:
        cmd.extend(["--workers", str(workers)])

    return cmd


def main():
    """Main entry point."""
    print("=" * 60)
    print("DCE Classifier API Server")
    print("=" * 60)

    load_dotenv()

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    workers = int(os.getenv("WORKERS", "1"))

    print(f"\nConfiguration:")
    print(f"  Host: {host}")
    print(f"  Port: {port}")
    print(f"  Workers: {workers}")
    print(f"  Batch workers: {os.getenv('DCE_BATCH_MAX_WORKERS', '4')}")
    print(f"  Log level: {os.getenv('DCE_LOG_LEVEL', 'INFO')}")

    print(f"\nAPI Documentation: http://localhost:{port}/docs")
    print("=" * 60)

    try:
        subprocess.run(build_command(host, port, workers))
    except KeyboardInterrupt:
        print("\n\nShutting down server...")
        sys.exit(0)


if __name__ == "__main__":
    main()
