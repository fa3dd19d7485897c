"""
Selector encodings shared by the concrete domains: compact JSON objects and ``{key="value"}`` matcher lists.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List, Tuple

_MATCHER = r'\w+\s*=\s*"[^"]*"'
_MATCHER_RE = re.compile(r'(\w+)\s*=\s*"([^"]*)"')
_MATCHERS_RE = re.compile(r"\{\s*(?:%s(?:\s*,\s*%s)*)?\s*\}" % (_MATCHER, _MATCHER))


def dump_json(obj: Dict[str, Any]) -> str:
    return json.dumps(obj, separators=(",", ":"))


def load_json_object(selector: str) -> Dict[str, Any]:
    obj = json.loads(selector)
    if not isinstance(obj, dict):
        raise ValueError(f"expected a JSON object: {selector}")
    return obj


def parse_matchers(selector: str) -> List[Tuple[str, str]]:
    text = selector.strip()
    if not _MATCHERS_RE.fullmatch(text):
        raise ValueError(f"expected {{key=\"value\",...}}: {selector}")
    return _MATCHER_RE.findall(text)


def format_matchers(pairs: List[Tuple[str, str]]) -> str:
    return "{" + ",".join(f'{k}="{v}"' for k, v in pairs) + "}"
