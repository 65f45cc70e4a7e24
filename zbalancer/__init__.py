"""ZeroMQ load balancer routing client requests to available workers."""

__version__ = "0.1.0"
__all__ = ["balancer"]