"""
Check that .env exists and the Gemini key is set (without printing it).
Run: python check_env.py
"""

import os
from pathlib import Path

from dotenv import load_dotenv


def main():
    root = Path(__file__).resolve().parent
    env_path = root / ".env"
    print("Project root:", root)
    print(".env path:", env_path)
    print(".env exists:", env_path.exists())
    if not env_path.exists():
        print("Create .env from .env.example and add GEMINI_API_KEY.")
        return
    load_dotenv(env_path)
    api_key = (os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or "").strip()
    print("Gemini key:", "SET" if api_key else "NOT SET")
    print("Model:", os.getenv("GEMINI_MODEL", "gemini-2.5-flash (default)"))
    if not api_key:
        print("Tip: without a key, 'python main.py analyze' returns the key-missing message.")


if __name__ == "__main__":
    main()
