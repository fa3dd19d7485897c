"""
Domain capability converting between queries and console links, and the registry that dispatches to it.

Each signal domain (alerts, logs, metrics, Kubernetes objects, network flows)
knows the shape of its console URLs and of its query selectors. ``Domains``
holds an ordered set of them and routes a query by its domain name, or a
link by its first path segment.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from correlate.constraint import Constraint
from correlate.exceptions import BadLink, BadQuery, DomainError, InvalidClass, UnknownDomain
from correlate.query import Class, Query
from correlate.uri import URIRef

log = logging.getLogger(__name__)


class Domain(ABC):
    name: str = ""
    # First path segments of the console links this domain understands.
    prefixes: Tuple[str, ...] = ()

    def __init__(self, name: Optional[str] = None, prefixes: Optional[Iterable[str]] = None) -> None:
        if name:
            self.name = name
        if prefixes is not None:
            self.prefixes = tuple(prefixes)
        elif not self.prefixes:
            self.prefixes = (self.name,)

    def class_(self, name: str) -> Class:
        if not name or ":" in name:
            raise InvalidClass(f"invalid class for domain {self.name}: {name}")
        return Class(self.name, name)

    @abstractmethod
    def query_to_link(self, query: Query, constraint: Optional[Constraint] = None) -> URIRef: ...

    @abstractmethod
    def link_to_query(self, link: URIRef) -> Query: ...

    def bad_query(self, query: object) -> BadQuery:
        return BadQuery(f"invalid query for domain {self.name}: {query}")

    def bad_link(self, link: object) -> BadLink:
        return BadLink(f"invalid link for domain {self.name}: {link}")

    def check_query(self, query: Optional[Query]) -> Query:
        if query is None or query.class_.domain != self.name:
            raise self.bad_query(query)
        return query

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Domains:
    def __init__(self, *domains: Domain) -> None:
        self._domains: List[Domain] = list(domains)

    def __iter__(self) -> Iterator[Domain]:
        return iter(self._domains)

    def __len__(self) -> int:
        return len(self._domains)

    @property
    def names(self) -> List[str]:
        return [d.name for d in self._domains]

    def domain(self, name: str) -> Optional[Domain]:
        for d in self._domains:
            if d.name == name:
                return d
        return None

    def replace(self, domain: Domain) -> Domains:
        return Domains(*[d for d in self._domains if d.name != domain.name], domain)

    def class_(self, s: str) -> Class:
        c = Class.parse(s)
        d = self.domain(c.domain)
        if d is None:
            raise UnknownDomain(f"unknown domain {c.domain}: {s}")
        return d.class_(c.name)

    def query_to_link(self, query: Query, constraint: Optional[Constraint] = None) -> URIRef:
        d = self.domain(query.class_.domain)
        if d is None:
            raise UnknownDomain(f"unknown domain {query.class_.domain}: {query}")
        link = d.query_to_link(query, constraint)
        log.debug("query_to_link %s => %s", query, link)
        return link

    def link_to_query(self, link: Union[URIRef, str]) -> Query:
        if isinstance(link, str):
            link = URIRef(link)
        segments = link.segments()
        first = segments[0] if segments else ""
        candidates = [d for d in self._domains if first in d.prefixes]
        if not candidates:
            raise UnknownDomain(f"unknown domain {first}: {link}")

        for d in candidates:
            try:
                query = d.link_to_query(link)
            except DomainError:
                # the last candidate's rejection is reported
                if d is candidates[-1]:
                    raise
                continue
            log.debug("link_to_query %s => %s", link, query)
            return query
        raise UnknownDomain(f"unknown domain {first}: {link}")
