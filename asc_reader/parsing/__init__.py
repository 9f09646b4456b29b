"""Parsing components: classification, metadata, schemas, blocks and tables."""

from .classifier import classify_line
from .header import HeaderResolver, model_from_version, parse_date
from .schema import (
    resolve_schemas,
    resolve_sample_schema,
    resolve_saccade_schema,
    resolve_fixation_schema,
)
from .blocks import BlockTracker
from .builders import (
    TableBuilder,
    SampleTableBuilder,
    EventTableBuilder,
    SaccadeTableBuilder,
    FixationTableBuilder,
    BlinkTableBuilder,
    MessageTableBuilder,
    InputTableBuilder,
    ButtonTableBuilder,
)

__all__ = [
    "classify_line",
    "HeaderResolver",
    "model_from_version",
    "parse_date",
    "resolve_schemas",
    "resolve_sample_schema",
    "resolve_saccade_schema",
    "resolve_fixation_schema",
    "BlockTracker",
    "TableBuilder",
    "SampleTableBuilder",
    "EventTableBuilder",
    "SaccadeTableBuilder",
    "FixationTableBuilder",
    "BlinkTableBuilder",
    "MessageTableBuilder",
    "InputTableBuilder",
    "ButtonTableBuilder",
]
