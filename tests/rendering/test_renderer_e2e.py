# topmark:header:start
#
#   project      : DiagKit
#   file         : test_renderer_e2e.py
#   file_relpath : tests/rendering/test_renderer_e2e.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests: collect from several threads, render every output form."""

from __future__ import annotations

import json
import threading

from diagkit.config.model import MutableDiagkitConfig
from diagkit.diagnostic.codes import E_DUPLICATE_TYPE, E_SYNTAX, E_TYPE_MISMATCH
from diagkit.diagnostic.collector import Collector
from diagkit.diagnostic.issue import Issue, new_issue
from diagkit.diagnostic.location import RelatedInfo, SourceId, Span
from diagkit.diagnostic.severity import Severity
from diagkit.diagnostic.sources import SourceRegistry
from diagkit.rendering.renderer import Renderer
from tests.conftest import mark_concurrency

SCHEMA = SourceId.synthetic("test://e2e/types.schema")
SCHEMA_TEXT = b"type User {\n  id: Int\n  id: String\n}\n"

CONFIG = """
[render]
excerpts = true
colors = false
lsp_source = "schemac"

[collect]
limit = 10
"""


def _issues() -> list[Issue]:
    dup = (
        new_issue(Severity.ERROR, E_DUPLICATE_TYPE, "duplicate field 'id'")
        .with_span(Span.range_with_bytes(SCHEMA, (3, 3, 24), (3, 5, 26)))
        .with_hint("rename the second field")
        .with_related(
            RelatedInfo(Span.range_with_bytes(SCHEMA, (2, 3, 14), (2, 5, 16)), "first defined here")
        )
        .build()
    )
    mismatch = (
        new_issue(Severity.WARNING, E_TYPE_MISMATCH, "expected Int")
        .with_path("users.json", "$[0].id")
        .with_expected_got("Int", "String")
        .build()
    )
    syntax = (
        new_issue(Severity.FATAL, E_SYNTAX, "unterminated block")
        .with_span(Span.point_with_byte(SCHEMA, 4, 1, 35))
        .build()
    )
    return [dup, mismatch, syntax]


def _collect_concurrently() -> Collector:
    cfg = MutableDiagkitConfig.from_toml_text(CONFIG).freeze()
    collector = Collector.from_config(cfg.collect)
    threads = [threading.Thread(target=collector.collect, args=(i,)) for i in _issues()]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return collector


@mark_concurrency
def test_end_to_end_text() -> None:
    """Order is deterministic regardless of collection order."""
    collector = _collect_concurrently()
    registry = SourceRegistry()
    registry.register(SCHEMA, SCHEMA_TEXT)
    cfg = MutableDiagkitConfig.from_toml_text(CONFIG).freeze()
    renderer = Renderer(cfg.render, provider=registry)

    result = collector.result()
    assert not result.ok()
    assert result.has_fatal()
    assert [i.code for i in result] == [E_DUPLICATE_TYPE, E_SYNTAX, E_TYPE_MISMATCH]

    text = renderer.format_result(result)
    assert text == (
        "test://e2e/types.schema:3:3: error[E_DUPLICATE_TYPE]: duplicate field 'id'"
        "\n  hint: rename the second field"
        "\n    |"
        "\n3 |   id: String"
        "\n    |   ^^"
        "\n  note: first defined here"
        "\n    --> test://e2e/types.schema:2:3"
        "\ntest://e2e/types.schema:4:1: error[E_SYNTAX]: unterminated block"
        "\n    |"
        "\n4 | }"
        "\n    | ^"
        "\nusers.json $[0].id: warning[E_TYPE_MISMATCH]: expected Int"
    )


@mark_concurrency
def test_end_to_end_json_and_lsp() -> None:
    """The same result renders to stable JSON and LSP diagnostics."""
    result = _collect_concurrently().result()
    registry = SourceRegistry()
    registry.register(SCHEMA, SCHEMA_TEXT)
    cfg = MutableDiagkitConfig.from_toml_text(CONFIG).freeze()
    renderer = Renderer(cfg.render, provider=registry)

    payload = json.loads(renderer.format_result_json(result))
    assert "limit" not in payload
    assert [i["severity"] for i in payload["issues"]] == ["error", "fatal", "warning"]
    assert payload["issues"][2]["details"] == [
        {"key": "expected", "value": "Int"},
        {"key": "got", "value": "String"},
    ]
    assert renderer.format_result_json(result) == renderer.format_result_json(result)

    diags = renderer.lsp_diagnostics(result)
    assert [d.code for d in diags] == ["E_DUPLICATE_TYPE", "E_SYNTAX"]
    assert all(d.source == "schemac" for d in diags)
    first = diags[0].to_dict()
    assert first["range"] == {
        "start": {"line": 2, "character": 2},
        "end": {"line": 2, "character": 4},
    }
    assert len(diags[0].related_information) == 1

    lines = renderer.format_result_ndjson(result).splitlines()
    assert len(lines) == 3
