# Service A - relays Service B's hello message
import http.cookiejar
import logging
import os

import requests
from flask import Flask, Response, jsonify

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
logger = logging.getLogger(__name__)

SERVICE_B_URL = os.getenv('SERVICE_B_URL', 'http://localhost:8081/service-b/hello')
_timeout = os.getenv('SERVICE_B_TIMEOUT')
SERVICE_B_TIMEOUT = float(_timeout) if _timeout else None

# Flask app
app = Flask(__name__)


class ServiceBClient:
    """Long-lived HTTP client for Service B.

    Built once at startup and shared by every request. Nothing on it is
    written after __init__: the session refuses every cookie, so no
    Set-Cookie from Service B leaks into later calls.
    """

    def __init__(self, url=SERVICE_B_URL, timeout=SERVICE_B_TIMEOUT):
        self.url = url
        self.timeout = timeout
        self.session = requests.Session()
        self.session.cookies.set_policy(http.cookiejar.DefaultCookiePolicy(allowed_domains=[]))
        logger.info(f"Service B client targeting {self.url}")

    def hello(self):
        """GET the hello endpoint and return the raw response.

        Non-2xx responses raise requests.HTTPError; connection problems raise
        whatever requests raises. No retries.
        """
        logger.info(f"Calling Service B at {self.url}")
        response = self.session.get(self.url, timeout=self.timeout)
        response.raise_for_status()
        return response


# Create global client instance
client = ServiceBClient()


@app.route('/service-a/call-service-b')
def call_service_b():
    """Return Service B's body byte for byte"""
    response = client.hello()
    content_type = response.headers.get('Content-Type', 'text/plain')
    return Response(response.content, status=200, content_type=content_type)


@app.route('/health')
def health_check():
    """Liveness check; does not touch Service B"""
    return jsonify({
        "status": "healthy",
        "service": "service-a",
        "service_b_url": client.url
    })


if __name__ == "__main__":
    host = os.getenv('HOST', '0.0.0.0')
    port = int(os.getenv('PORT', '8080'))
    logger.info(f"Starting Service A on {host}:{port}")
    app.run(host=host, port=port, debug=False)
