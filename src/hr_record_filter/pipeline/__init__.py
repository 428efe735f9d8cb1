"""
Pipeline Package - Orchestration and Resolution.

Components:
    - RecordFilterPipeline: runs the stages over a record collection
    - FilterContext: employee / job lookups with the "Unknown" sentinel
    - create_pipeline / filter_records: wiring helpers
    - build_filter_options: choices for the filter menus

Design Principles:
    - All dependencies injected via constructor
    - Stateless operation: criteria in, visible records out
"""

from hr_record_filter.pipeline.filter_context import FilterContext
from hr_record_filter.pipeline.record_pipeline import RecordFilterPipeline
from hr_record_filter.pipeline.facets import build_category_options, build_filter_options
from hr_record_filter.pipeline.factory import create_pipeline, filter_records

__all__ = [
    "FilterContext",
    "RecordFilterPipeline",
    "build_category_options",
    "build_filter_options",
    "create_pipeline",
    "filter_records",
]
