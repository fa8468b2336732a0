"""Development server for the variantexplorer Flask API."""

import os
import sys

# Add parent directory to path so we can import backend
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from dotenv import load_dotenv

from backend.app import flask_app

if __name__ == "__main__":
    load_dotenv()

    if os.environ.get("VARIANTEXPLORER_ENABLE_LLM_EXTRACTION", "").lower() in ("1", "true") and not os.environ.get(
        "OPENAI_API_KEY"
    ):
        print("Warning: LLM extraction is enabled but OPENAI_API_KEY is not set!")

    print("Starting variantexplorer API server...")
    print("API available at: http://localhost:5000")
    print("Health check: http://localhost:5000/api/health")
    print("Press Ctrl+C to stop")

    flask_app.run(
        host="0.0.0.0",
        port=5000,
        debug=True,
    )
