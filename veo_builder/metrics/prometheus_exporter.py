"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter, Histogram


prompts_built_total = Counter(
    "prompts_built_total",
    "Total number of prompts assembled through the API.",
)

prompts_saved_total = Counter(
    "prompts_saved_total",
    "Total number of prompts persisted by users.",
)

prompts_deleted_total = Counter(
    "prompts_deleted_total",
    "Total number of saved prompts removed by users.",
)

prompt_quality_overall = Histogram(
    "prompt_quality_overall",
    "Distribution of overall prompt quality scores.",
    buckets=(20, 40, 60, 80, 100),
)
