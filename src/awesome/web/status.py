"""Pod status HTTP proxy.

Serves ``GET /status`` with the name and phase of every pod in the cluster.
"""

import logging
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

try:
    from flask import Flask, Response, jsonify

    FLASK_AVAILABLE = True
except ImportError:
    FLASK_AVAILABLE = False


class KubernetesUnavailable(Exception):
    """Raised when the kubernetes client cannot be configured."""


def load_core_api():
    """Build a CoreV1Api client.

    Uses ``~/.kube/config`` when a home directory exists, in-cluster
    configuration otherwise.
    """
    try:
        from kubernetes import client, config
    except ImportError as e:
        raise KubernetesUnavailable(
            "kubernetes is not installed. Install with: pip install awesome-cli[k8s]"
        ) from e

    home = Path.home()
    if str(home) and home.exists():
        config.load_kube_config(config_file=str(home / ".kube" / "config"))
    else:
        config.load_incluster_config()
    return client.CoreV1Api()


def list_pod_statuses(core_api) -> list[dict[str, str]]:
    pods = core_api.list_pod_for_all_namespaces()
    return [
        {"name": pod.metadata.name, "status": pod.status.phase or ""}
        for pod in pods.items
    ]


def create_app(api_factory: Callable | None = None) -> "Flask":
    """Create the status proxy app.

    Args:
        api_factory: Callable returning a CoreV1Api-like client. Called on
            every request. Defaults to ``load_core_api``.
    """
    if not FLASK_AVAILABLE:
        raise ImportError("Flask is not installed. Install with: pip install flask")

    api_factory = api_factory or load_core_api
    app = Flask(__name__)

    @app.route("/status")
    def status():
        try:
            core_api = api_factory()
        except Exception as e:
            logger.error(f"Failed to get Kubernetes clientset: {e}")
            return Response(
                f"Failed to get Kubernetes clientset: {e}", status=500, mimetype="text/plain"
            )
        try:
            statuses = list_pod_statuses(core_api)
        except Exception as e:
            logger.error(f"Failed to get pods: {e}")
            return Response(f"Failed to get pods: {e}", status=500, mimetype="text/plain")
        return jsonify(statuses)

    return app
