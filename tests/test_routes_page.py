import re
import unittest

from fastapi.testclient import TestClient

from service2.main import app
from service2.page import HTML_RESPONSE


class UniformResponseTests(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)

    def assertPage(self, response, with_body=True):
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.headers["content-type"].startswith("text/html"))
        if with_body:
            self.assertEqual(response.text, HTML_RESPONSE)

    def test_every_method_and_path_gets_the_page(self):
        paths = ["/", "/docs", "/api", "/contact", "/redoc", "/openapi.json", "/a/b/c?x=1"]
        methods = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
        for method in methods:
            for path in paths:
                with self.subTest(method=method, path=path):
                    self.assertPage(self.client.request(method, path))

    def test_head_request(self):
        self.assertPage(self.client.head("/anything"), with_body=False)

    def test_unlisted_method_is_not_rejected(self):
        self.assertPage(self.client.request("PROPFIND", "/"))

    def test_request_body_is_ignored(self):
        response = self.client.post("/api", json={"name": "x"}, headers={"Accept": "application/json"})
        self.assertPage(response)

    def test_body_is_identical_across_requests(self):
        first = self.client.get("/").content
        for _ in range(5):
            self.assertEqual(self.client.get("/").content, first)
        self.assertEqual(first, HTML_RESPONSE.encode("utf-8"))

    def test_page_links_are_present(self):
        body = self.client.get("/").text
        for link in ('href="/docs"', 'href="/api"', 'href="/contact"'):
            self.assertIn(link, body)


class RequestLoggingTests(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)

    def test_logs_method_and_path_with_timestamp(self):
        with self.assertLogs("service2.main", level="INFO") as logs:
            self.client.delete("/contact")
        pattern = r"\[\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z\] DELETE /contact$"
        self.assertTrue(any(re.search(pattern, line) for line in logs.output), logs.output)

    def test_logs_query_string(self):
        with self.assertLogs("service2.main", level="INFO") as logs:
            self.client.get("/api?page=2")
        self.assertTrue(any(line.endswith("GET /api?page=2") for line in logs.output))

    def test_logs_encoded_target_verbatim(self):
        with self.assertLogs("service2.main", level="INFO") as logs:
            self.client.delete("/a%20b?q=1")
        self.assertTrue(any(line.endswith("] DELETE /a%20b?q=1") for line in logs.output), logs.output)

    def test_encoded_newline_cannot_forge_a_second_entry(self):
        with self.assertLogs("service2.main", level="INFO") as logs:
            self.client.get("/x%0A%5B2020-01-01T00:00:00.000Z%5D%20DELETE%20/admin")
        request_lines = [line for line in logs.output if "] GET /x" in line]
        self.assertEqual(len(request_lines), 1)
        self.assertTrue(request_lines[0].endswith("GET /x%0A%5B2020-01-01T00:00:00.000Z%5D%20DELETE%20/admin"))
        self.assertNotIn("\n", request_lines[0])

    def test_one_line_per_request(self):
        with self.assertLogs("service2.main", level="INFO") as logs:
            self.client.get("/one")
            self.client.put("/two")
        request_lines = [line for line in logs.output if re.search(r"\] (GET|PUT) /", line)]
        self.assertEqual(len(request_lines), 2)


if __name__ == "__main__":
    unittest.main()
