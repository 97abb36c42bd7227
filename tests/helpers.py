"""Test helpers for HTTP responses and timers"""
import json

import requests

TEST_ORIGIN = "https://media.test"
TEST_ENDPOINT = f"{TEST_ORIGIN}/api/v1/uploadImg"


def make_response(status_code=200, json_body=None, text=None):
    """Build a real requests.Response with the given status and body"""
    response = requests.Response()
    response.status_code = status_code
    response.url = TEST_ENDPOINT
    response.encoding = "utf-8"
    if json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
    else:
        response._content = (text or "").encode("utf-8")
    return response


class ManualScheduler:
    """Collects timers instead of running them, so tests fire them by hand"""

    def __init__(self):
        self.pending = []

    def __call__(self, delay, callback):
        self.pending.append((delay, callback))

    def fire(self, index):
        _, callback = self.pending[index]
        callback()
