"""Interactive turn-taking chat over TCP/IPv4: a client, a server and shared message helpers."""

__version__ = "0.1.0"
__all__ = ["common", "client", "server"]