from tfl_client.middleware.request_logging import make_event_hooks, status_bucket

__all__ = ["make_event_hooks", "status_bucket"]
