"""
Cross-domain correlation value objects: queries, constraints, URI references, domains and correlation graphs.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from correlate.constraint import Constraint
from correlate.domain import Domain, Domains
from correlate.graph import ClassNode, Edge, ErrorNode, Graph, Node, QueryCount, Rule
from correlate.query import Class, Query
from correlate.uri import SearchParams, URIRef, join_path

__all__ = [
    "Class", "Query", "Constraint", "URIRef", "SearchParams", "join_path",
    "Domain", "Domains",
    "Graph", "Node", "ClassNode", "ErrorNode", "Edge", "Rule", "QueryCount",
]
