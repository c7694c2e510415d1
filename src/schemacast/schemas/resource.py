# Copyright 2026 Schemacast Contributors
# SPDX-License-Identifier: Apache-2.0

"""Descriptor table for resource-definition schema documents.

A resource-definition schema is a JSON Schema document describing a
versioned resource (``apiVersion``, ``kind``, ``metadata``, ``spec``) whose
spec is one of several trigger/data/prompt shapes. This table describes the
schema document itself, so that it can be checked and converted to typed
values before it is used.
"""

from __future__ import annotations

from schemacast.model.descriptors import (
    PropertyDescriptor,
    array_of,
    boolean,
    number,
    obj,
    optional,
    prop,
    ref,
    string,
)
from schemacast.model.table import DescriptorTable

ROOT_TYPE = "ResourceSchema"


def _object_schema(
    properties_type: str, *, required: bool = True, extra: list[PropertyDescriptor] | None = None
) -> list[PropertyDescriptor]:
    """Properties shared by every nested ``type: object`` schema node."""
    props = [
        prop("type", string()),
        prop("description", string()),
    ]
    if required:
        props.append(prop("required", array_of(string())))
    props.append(prop("additionalProperties", boolean()))
    props.append(prop("properties", ref(properties_type)))
    return props + (extra or [])


RESOURCE_SCHEMA_TABLE = DescriptorTable(
    {
        "ResourceSchema": obj(
            [
                prop("$schema", string()),
                prop("$id", string()),
                prop("title", string()),
                prop("description", string()),
                prop("type", string()),
                prop("required", array_of(string())),
                prop("additionalProperties", boolean()),
                prop("properties", ref("ResourceSchemaProperties")),
                prop("$defs", ref("Defs")),
            ]
        ),
        "Defs": obj(
            [
                prop("trigger", ref("Trigger")),
                prop("LLMSpec", ref("Spec")),
                prop("FunnelSpec", ref("Spec")),
                prop("dataSpec", ref("DataSpec")),
            ]
        ),
        "Spec": obj(_object_schema("FunnelSpecProperties")),
        "FunnelSpecProperties": obj(
            [
                prop("type", ref("APIVersion")),
                prop("trigger", ref("Data")),
                prop("data", ref("Data")),
                prop("llmPrompt", optional(ref("LlmPrompt"))),
            ]
        ),
        "Data": obj(
            [
                prop("$ref", string()),
                prop("description", string()),
            ]
        ),
        "LlmPrompt": obj(
            [
                prop("type", string()),
                prop("minLength", number()),
                prop("description", string()),
                prop("maxLength", optional(number())),
                prop("pattern", optional(string())),
            ]
        ),
        "APIVersion": obj(
            [
                prop("type", string()),
                prop("const", string()),
                prop("description", string()),
            ]
        ),
        "DataSpec": obj(_object_schema("DataSpecProperties", required=False)),
        "DataSpecProperties": obj(
            [
                prop("minEvents", ref("MaxEventsClass")),
                prop("maxEvents", ref("MaxEventsClass")),
                prop("events", ref("Events")),
            ]
        ),
        "Events": obj(
            [
                prop("description", string()),
                prop("oneOf", array_of(ref("EventsOneOf"))),
            ]
        ),
        "EventsOneOf": obj(
            [
                prop("type", string()),
                prop("const", optional(string())),
                prop("description", string()),
                prop("minItems", optional(number())),
                prop("uniqueItems", optional(boolean())),
                prop("items", optional(ref("LlmPrompt"))),
            ]
        ),
        "MaxEventsClass": obj(
            [
                prop("type", string()),
                prop("minimum", number()),
                prop("description", string()),
            ]
        ),
        "Trigger": obj(
            _object_schema("TriggerProperties", extra=[prop("allOf", array_of(ref("AllOf")))]),
        ),
        "AllOf": obj(
            [
                prop("if", ref("If")),
                prop("then", ref("Then")),
            ]
        ),
        "If": obj(
            [
                prop("properties", ref("IfProperties")),
                prop("required", array_of(string())),
            ]
        ),
        "IfProperties": obj([prop("mode", ref("PurpleMode"))]),
        "PurpleMode": obj([prop("const", string())]),
        "Then": obj([prop("required", array_of(string()))]),
        "TriggerProperties": obj(
            [
                prop("mode", ref("FluffyMode")),
                prop("schedule", ref("Schedule")),
            ]
        ),
        "FluffyMode": obj(
            [
                prop("type", string()),
                prop("enum", array_of(string())),
                prop("description", string()),
            ]
        ),
        "Schedule": obj(
            [
                prop("description", string()),
                prop("oneOf", array_of(ref("ScheduleOneOf"))),
            ]
        ),
        "ScheduleOneOf": obj(
            [
                prop("type", string()),
                prop("enum", optional(array_of(string()))),
                prop("description", string()),
                prop("additionalProperties", optional(boolean())),
                prop("required", optional(array_of(string()))),
                prop("properties", optional(ref("OneOfProperties"))),
            ]
        ),
        "OneOfProperties": obj([prop("cron", ref("LlmPrompt"))]),
        "ResourceSchemaProperties": obj(
            [
                prop("apiVersion", ref("APIVersion")),
                prop("kind", ref("APIVersion")),
                prop("metadata", ref("Metadata")),
                prop("spec", ref("SpecClass")),
            ]
        ),
        "Metadata": obj(_object_schema("MetadataProperties")),
        "MetadataProperties": obj(
            [
                prop("name", ref("LlmPrompt")),
                prop("displayName", ref("LlmPrompt")),
                prop("description", ref("LlmPrompt")),
            ]
        ),
        "SpecClass": obj(
            [
                prop("description", string()),
                prop("oneOf", array_of(ref("SpecOneOf"))),
            ]
        ),
        "SpecOneOf": obj([prop("$ref", string())]),
    }
)
