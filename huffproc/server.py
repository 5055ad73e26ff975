"""
server.py

HTTP front end for the Huffman processor. Clients POST raw bytes and get the
compressed (or restored) bytes back in the response body.
"""

from datetime import datetime, timezone

from flask import Flask, Response, jsonify, request

from .compression import Compressor
from .config_loader import load_config
from .exceptions import HuffException

# Flask app setup
app = Flask(__name__)

# Load configuration and defaults
config = load_config()
app.config["MAX_CONTENT_LENGTH"] = config["server"]["max_content_length"]

ENDPOINTS = ["/compress", "/decompress", "/health"]


def _compressor():
    return Compressor(config=config)


@app.route("/health", methods=["GET"])
def health_check():
    """Health check endpoint"""
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "endpoints": ENDPOINTS,
    })


@app.route("/compress", methods=["POST"])
def compress():
    """Compress the raw request body"""
    data = request.get_data()
    compressed = _compressor().compress(data)
    print(f"📦 /compress: {len(data)} -> {len(compressed)} bytes")

    response = Response(compressed, mimetype="application/octet-stream")
    response.headers["X-Original-Size"] = str(len(data))
    response.headers["X-Compressed-Size"] = str(len(compressed))
    return response


@app.route("/decompress", methods=["POST"])
def decompress():
    """Restore the original bytes from a compressed request body"""
    data = request.get_data()
    try:
        restored = _compressor().decompress(data)
    except HuffException as e:
        print(f"❌ /decompress rejected {len(data)} bytes: {e}")
        return jsonify({"error": str(e), "type": type(e).__name__}), 400

    print(f"📂 /decompress: {len(data)} -> {len(restored)} bytes")
    return Response(restored, mimetype="application/octet-stream")


if __name__ == "__main__":
    print("\n🚀 Starting huffproc server...")
    print("Available endpoints:")
    for endpoint in ENDPOINTS:
        print(f"  {endpoint}")
    app.run(host=config["server"]["host"], port=config["server"]["port"])
