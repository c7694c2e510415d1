# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for the Schemacast test suite."""

from typing import Any

import pytest


def _spec(description: str, spec_type: str, with_prompt: bool) -> dict[str, Any]:
    properties: dict[str, Any] = {
        "type": {"type": "string", "const": spec_type, "description": "Spec type"},
        "trigger": {"$ref": "#/$defs/trigger", "description": "When the spec runs"},
        "data": {"$ref": "#/$defs/dataSpec", "description": "Input data selection"},
    }
    if with_prompt:
        properties["llmPrompt"] = {
            "type": "string",
            "minLength": 1,
            "description": "Prompt sent to the model",
            "maxLength": 4000,
        }
    return {
        "type": "object",
        "description": description,
        "required": ["type", "trigger", "data"],
        "additionalProperties": False,
        "properties": properties,
    }


@pytest.fixture
def resource_document() -> dict[str, Any]:
    """A complete, valid resource-definition schema document in serialized form."""
    return {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "$id": "https://example.com/schemas/resource.schema.json",
        "title": "Resource",
        "description": "A versioned resource definition",
        "type": "object",
        "required": ["apiVersion", "kind", "metadata", "spec"],
        "additionalProperties": False,
        "properties": {
            "apiVersion": {"type": "string", "const": "pipelines/v1", "description": "API version"},
            "kind": {"type": "string", "const": "Pipeline", "description": "Resource kind"},
            "metadata": {
                "type": "object",
                "description": "Identifying metadata",
                "required": ["name"],
                "additionalProperties": False,
                "properties": {
                    "name": {
                        "type": "string",
                        "minLength": 1,
                        "description": "Unique name",
                        "maxLength": 63,
                        "pattern": "^[a-z][a-z0-9-]*$",
                    },
                    "displayName": {"type": "string", "minLength": 1, "description": "Human-readable name"},
                    "description": {"type": "string", "minLength": 0, "description": "Free-form description"},
                },
            },
            "spec": {
                "description": "The resource specification",
                "oneOf": [{"$ref": "#/$defs/LLMSpec"}, {"$ref": "#/$defs/FunnelSpec"}],
            },
        },
        "$defs": {
            "trigger": {
                "type": "object",
                "description": "How a run is started",
                "required": ["mode"],
                "additionalProperties": False,
                "properties": {
                    "mode": {"type": "string", "enum": ["manual", "scheduled"], "description": "Trigger mode"},
                    "schedule": {
                        "description": "Schedule for scheduled runs",
                        "oneOf": [
                            {"type": "string", "enum": ["hourly", "daily"], "description": "Preset schedule"},
                            {
                                "type": "object",
                                "description": "Cron schedule",
                                "additionalProperties": False,
                                "required": ["cron"],
                                "properties": {
                                    "cron": {"type": "string", "minLength": 9, "description": "Cron expression"}
                                },
                            },
                        ],
                    },
                },
                "allOf": [
                    {
                        "if": {"properties": {"mode": {"const": "scheduled"}}, "required": ["mode"]},
                        "then": {"required": ["schedule"]},
                    }
                ],
            },
            "LLMSpec": _spec("Model-backed spec", "llm", with_prompt=True),
            "FunnelSpec": _spec("Funnel spec", "funnel", with_prompt=False),
            "dataSpec": {
                "type": "object",
                "description": "Selection of input events",
                "additionalProperties": False,
                "properties": {
                    "minEvents": {"type": "integer", "minimum": 0, "description": "Minimum number of events"},
                    "maxEvents": {"type": "integer", "minimum": 1, "description": "Maximum number of events"},
                    "events": {
                        "description": "Which events to use",
                        "oneOf": [
                            {"type": "string", "const": "all", "description": "Every event"},
                            {
                                "type": "array",
                                "description": "Listed events",
                                "minItems": 1,
                                "uniqueItems": True,
                                "items": {"type": "string", "minLength": 1, "description": "Event name"},
                            },
                        ],
                    },
                },
            },
        },
    }
