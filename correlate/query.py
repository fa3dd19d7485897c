"""
Class and Query value objects for the uniform ``domain:class:selector`` query string.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass

from correlate.exceptions import InvalidClass, InvalidQuery


@dataclass(frozen=True)
class Class:
    domain: str
    name: str

    @classmethod
    def parse(cls, s: str) -> Class:
        domain, sep, name = (s or "").partition(":")
        if not sep or not domain or not name or ":" in name:
            raise InvalidClass(f"invalid class: {s}")
        return cls(domain, name)

    def query(self, selector: str) -> Query:
        return Query(self, selector)

    def __str__(self) -> str:
        return f"{self.domain}:{self.name}"


@dataclass(frozen=True)
class Query:
    class_: Class
    selector: str

    @classmethod
    def parse(cls, s: str) -> Query:
        # Only the first two colons are separators, the selector keeps the rest.
        parts = (s or "").split(":", 2)
        if len(parts) < 3:
            raise InvalidQuery(f"invalid query string: {s}")
        domain, name, selector = parts
        return cls(Class(domain, name), selector)

    def __str__(self) -> str:
        return f"{self.class_}:{self.selector}"
