"""Response schema handed to the model, and helpers that derive from it.

ANALYSIS_RESULT_SCHEMA uses the Gemini structured-output dialect (upper-case
type names). ``to_json_schema`` produces the standard JSON Schema form for
providers that want it. ``schema_tree`` and ``model_tree`` exist so the
schema and the pydantic contracts can be compared field by field.
"""

import copy
from typing import Any, Dict, List, Optional, Type, Union, get_args, get_origin

from pydantic import BaseModel


def _string(description: Optional[str] = None) -> Dict[str, Any]:
    field = {"type": "STRING"}
    if description:
        field["description"] = description
    return field


def _string_list(description: Optional[str] = None) -> Dict[str, Any]:
    field = {"type": "ARRAY", "items": {"type": "STRING"}}
    if description:
        field["description"] = description
    return field


def _object(properties: Dict[str, Any]) -> Dict[str, Any]:
    # Every field is mandatory in the producer contract
    return {"type": "OBJECT", "properties": properties, "required": list(properties)}


ANALYSIS_RESULT_SCHEMA: Dict[str, Any] = _object({
    "client_snapshot": _object({
        "organization_type": _string(),
        "technical_maturity_level": _string(),
        "top_priorities": _string_list(),
        "constraints": _string_list(),
        "risk_factors": _string_list(),
        "detected_pains": _string_list(),
        "detected_goals": _string_list(),
    }),
    "core_drivers": _string_list(),
    "top_recommendations": {
        "type": "ARRAY",
        "items": _object({
            "solution_name": _string(),
            "architecture_layer": _string(),
            "business_value": _string(),
            "technical_reason": _string(),
            "transcript_reference": _string(),
            "confidence_score": {"type": "NUMBER"},
            "pricing_model": _string(),
            "estimated_monthly_cost": _string("Specific dollar amount (e.g., $150.00/mo)"),
            "cost_breakdown": _string_list("Detailed breakdown of costs for AWS services."),
            "why_it_fits": _string(),
            "complementary_solutions": _string_list("Cross-sell opportunities."),
        }),
    },
    "matched_use_cases": {
        "type": "ARRAY",
        "items": _object({
            "scenario_name": _string(),
            "format": _string("SPAR or STAR"),
            "situation": _string(),
            "problem_or_task": _string("Problem for SPAR, Task for STAR"),
            "action": _string(),
            "result": _string(),
            "industry_relevance": _string(),
        }),
    },
    "diagrams": _object({
        "use_case_diagram": _string("Mermaid.js code for a Use Case diagram."),
        "tech_architecture_diagram": _string("Mermaid.js code for a System Technical Architecture diagram."),
    }),
    "recommended_pilot": _object({
        "name": _string(),
        "why_this_pilot": _string(),
        "high_level_architecture": _string_list(),
        "measurable_success_metrics": _string_list(),
    }),
    "implementation_phases": {
        "type": "ARRAY",
        "items": _object({
            "phase_name": _string(),
            "focus": _string(),
            "expected_outcome": _string(),
        }),
    },
    "next_steps": _object({
        "demo_direction": _string(),
        "follow_up_focus": _string(),
        "validation_questions": _string_list("What to ask next to validate fit."),
    }),
    "executive_summary": _string(),
})


def to_json_schema(schema: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a Gemini-dialect schema into standard JSON Schema.

    Type names are lower-cased and every object gets
    ``additionalProperties: false`` so strict structured-output modes accept it.
    The input is not modified.
    """
    converted = copy.deepcopy(schema)
    if "type" in converted:
        converted["type"] = converted["type"].lower()
    if "properties" in converted:
        converted["properties"] = {
            name: to_json_schema(field) for name, field in converted["properties"].items()
        }
        converted["additionalProperties"] = False
    if "items" in converted:
        converted["items"] = to_json_schema(converted["items"])
    return converted


Tree = Union[str, List[Any], Dict[str, Any]]


def schema_tree(schema: Dict[str, Any]) -> Tree:
    """Reduce a schema to {field: tree}, [item_tree] for arrays, or a scalar type name."""
    kind = schema["type"].upper()
    if kind == "OBJECT":
        return {name: schema_tree(field) for name, field in schema["properties"].items()}
    if kind == "ARRAY":
        return [schema_tree(schema["items"])]
    return kind


_SCALARS = {str: "STRING", float: "NUMBER", int: "INTEGER", bool: "BOOLEAN"}


def _annotation_tree(annotation: Any) -> Tree:
    if get_origin(annotation) in (list, List):
        (item,) = get_args(annotation)
        return [_annotation_tree(item)]
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return model_tree(annotation)
    if annotation in _SCALARS:
        return _SCALARS[annotation]
    raise TypeError(f"Unsupported annotation in contract: {annotation!r}")


def model_tree(model_cls: Type[BaseModel]) -> Dict[str, Any]:
    """Reduce a pydantic model to the same shape ``schema_tree`` produces."""
    return {
        name: _annotation_tree(field.annotation)
        for name, field in model_cls.model_fields.items()
    }


def required_paths(schema: Dict[str, Any], prefix: str = "") -> List[str]:
    """List the dotted path of every required field; array items are marked with []."""
    paths = []
    kind = schema["type"].upper()
    if kind == "OBJECT":
        for name in schema.get("required", []):
            path = f"{prefix}.{name}" if prefix else name
            paths.append(path)
            paths.extend(required_paths(schema["properties"][name], path))
    elif kind == "ARRAY":
        paths.extend(required_paths(schema["items"], f"{prefix}[]"))
    return paths


def model_required_paths(model_cls: Type[BaseModel], prefix: str = "") -> List[str]:
    """The ``required_paths`` equivalent for a pydantic model."""
    paths = []
    for name, field in model_cls.model_fields.items():
        if not field.is_required():
            continue
        path = f"{prefix}.{name}" if prefix else name
        paths.append(path)
        annotation = field.annotation
        if get_origin(annotation) in (list, List):
            (annotation,) = get_args(annotation)
            path = f"{path}[]"
        if isinstance(annotation, type) and issubclass(annotation, BaseModel):
            paths.extend(model_required_paths(annotation, path))
    return paths
