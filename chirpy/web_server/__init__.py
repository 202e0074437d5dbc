"""HTTP interface for chirpy."""

from chirpy.web_server.web_server import ChirpyWebServer

__all__ = ["ChirpyWebServer"]
