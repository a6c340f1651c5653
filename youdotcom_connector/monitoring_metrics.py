from prometheus_client import Counter, Histogram

API_REQUESTS = Counter("youdotcom_requests_total", "You.com API requests", ["operation"])
API_ERRORS   = Counter("youdotcom_errors_total",   "Failed items",          ["operation", "kind"])
API_LATENCY  = Histogram("youdotcom_request_seconds", "You.com API latency", ["operation"])
