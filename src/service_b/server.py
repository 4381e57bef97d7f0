import logging
import os

from flask import Flask, Response, jsonify

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
logger = logging.getLogger(__name__)

app = Flask(__name__)

HELLO_MESSAGE = "Hello from Service B"


@app.route('/service-b/hello')
def hello():
    """Plain-text greeting that Service A relays"""
    return Response(HELLO_MESSAGE, mimetype='text/plain')


@app.route('/health')
def health_check():
    """Liveness check"""
    return jsonify({"status": "healthy", "service": "service-b"})


if __name__ == "__main__":
    host = os.getenv('HOST', '0.0.0.0')
    port = int(os.getenv('PORT', '8081'))
    logger.info(f"Starting Service B on {host}:{port}")
    app.run(host=host, port=port, debug=False)
