"""Flask REST API for variant exploration."""

import asyncio
import logging
import os
from typing import Any

from asgiref.wsgi import WsgiToAsgi
from flask import Flask, jsonify, request
from flask_cors import CORS

from variantexplorer.config import Settings, load_settings
from variantexplorer.engine import VariantExplorer
from variantexplorer.models.result import ExplorationFailure

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create Flask app
flask_app = Flask(__name__)

CORS(flask_app, resources={r"/api/*": {"origins": "*"}})


def get_settings() -> Settings:
    """Load settings for one request."""
    return load_settings(os.environ.get("VARIANTEXPLORER_CONFIG"))


async def _explore(query: str) -> Any:
    async with VariantExplorer(settings=get_settings()) as explorer:
        return await explorer.explore_variant(query)


@flask_app.route("/api/health", methods=["GET"])
def health_check() -> tuple[dict[str, str], int]:
    """Health check endpoint."""
    return jsonify({"status": "healthy", "service": "variantexplorer API"}), 200


@flask_app.route("/api/explore", methods=["POST"])
def explore() -> tuple[dict[str, Any], int]:
    """Resolve a variant query and aggregate its annotations.

    Request body:
        {
            "query": "BRCA1 c.68_69delAG"
        }

    Returns:
        200 with parsed/coordinates/annotations, or 422 with error/details
    """
    data = request.get_json(silent=True)
    if not data:
        return jsonify({"error": "Request body is required"}), 400

    query = data.get("query")
    if not isinstance(query, str) or not query.strip():
        return jsonify({"error": "'query' is required"}), 400

    logger.info(f"Exploring variant: {query}")
    try:
        result = asyncio.run(_explore(query))
    except Exception as e:
        logger.error(f"Exploration failed: {str(e)}", exc_info=True)
        return jsonify({"error": f"Exploration failed: {str(e)}"}), 500

    status = 422 if isinstance(result, ExplorationFailure) else 200
    return jsonify(result.model_dump(mode="json")), status


@flask_app.errorhandler(404)
def not_found(error: Any) -> tuple[dict[str, str], int]:
    """Handle 404 errors."""
    return jsonify({"error": "Endpoint not found"}), 404


@flask_app.errorhandler(500)
def internal_error(error: Any) -> tuple[dict[str, str], int]:
    """Handle 500 errors."""
    logger.error(f"Internal server error: {str(error)}", exc_info=True)
    return jsonify({"error": "Internal server error"}), 500


# Wrap Flask app with ASGI adapter for async support
app = WsgiToAsgi(flask_app)


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))

    flask_app.run(
        host="0.0.0.0",
        port=port,
        debug=os.environ.get("FLASK_ENV") == "development",
    )
