import io
import json
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from domain.entities import Annotation, AnnotationSet
from domain.interfaces import AnnotationClient
from infrastructure.cache.in_memory_cache_store import InMemoryCacheStore
from infrastructure.config import ServiceConfig, build_default_container


class StaticClient(AnnotationClient):
    def __init__(self, result: AnnotationSet) -> None:
        self.result = result

    def annotate(self, chunk: str, api_key: str) -> AnnotationSet:
        return self.result


class TestExtractKeywordsCli(unittest.TestCase):
    def run_cli(self, argv: list[str], api_key: str = "secret", result: AnnotationSet = ()) -> tuple[int, str, str]:
        from scripts import extract_keywords

        container = build_default_container(
            ServiceConfig(api_key=api_key),
            client=StaticClient(result),
            cache=InMemoryCacheStore(),
        )
        stdout, stderr = io.StringIO(), io.StringIO()
        with patch.object(extract_keywords, "build_default_container", return_value=container), patch.object(
            extract_keywords, "setup_logging"
        ), redirect_stdout(stdout), redirect_stderr(stderr):
            code = extract_keywords.main(argv)
        return code, stdout.getvalue(), stderr.getvalue()

    def test_prints_json_payload(self) -> None:
        code, out, _ = self.run_cli(["--json", "Apple released a new iPhone."], result=(Annotation("Apple", 0.9),))

        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out), {"success": True, "keywords": [{"keyword": "Apple", "confidence": 0.9, "uri": ""}]})

    def test_reports_errors_on_stderr(self) -> None:
        code, out, err = self.run_cli(["Apple released a new iPhone."], api_key="")

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Dandelion API key is not set.", err)


if __name__ == "__main__":
    unittest.main()
