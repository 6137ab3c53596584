#!/usr/bin/env python3
"""Development server startup script. Pickups stay in test mode unless ABF_MODE=live."""

import os
import subprocess


def main():
    os.environ.setdefault("ABF_MODE", "test")

    cmd = [
        "uvicorn", "main:app", "--app-dir", "src", "--reload",
        "--host", "0.0.0.0", "--port", "8080", "--log-level", "debug",
    ]

    print("Starting development server...")
    print(f"Command: {' '.join(cmd)}")
    print(f"ABF mode: {os.environ['ABF_MODE']}")
    print("API docs at: http://localhost:8080/docs")
    print("-" * 50)

    subprocess.run(cmd)


if __name__ == "__main__":
    main()
