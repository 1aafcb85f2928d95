from types import MappingProxyType

import pytest
from pydantic import BaseModel, ValidationError

from affordances.exceptions import InvalidAffordanceError
from affordances.models.affordance import Affordance
from affordances.models.operation import Operation, ParameterRole, body, operation, path, query
from affordances.models.verbs import HttpVerb
from affordances.services.builder import AffordanceBuilder, build_affordance
from affordances.services.locator import locate_body_type


class Order(BaseModel):
    sku: str
    quantity: int


@pytest.mark.parametrize("verb", ["GET", "DELETE", "HEAD", "OPTIONS"])
def test_non_mutating_verbs_have_no_properties(verb, person_model):
    op = operation("person", verb, path("id"), body("person", person_model))
    affordance = build_affordance(op)
    assert affordance.required is False
    assert dict(affordance.properties) == {}


@pytest.mark.parametrize("verb", ["POST", "PUT"])
def test_post_and_put_are_required(verb, person_model):
    affordance = build_affordance(operation("save", verb, body("person", person_model)))
    assert affordance.required is True
    assert dict(affordance.properties) == {"name": str, "age": int}


def test_patch_is_optional_but_describes_body(person_model):
    affordance = build_affordance(operation("patch_person", "PATCH", path("id"), body("person", person_model)))
    assert affordance.required is False
    assert dict(affordance.properties) == {"name": str, "age": int}


def test_post_without_body_parameter(person_model):
    affordance = build_affordance(operation("trigger", "POST", path("id"), query("force", bool)))
    assert affordance.required is True
    assert dict(affordance.properties) == {}


def test_unknown_verb_degrades_safely(person_model):
    affordance = build_affordance(operation("fetch", "PROPFIND", body("person", person_model)))
    assert affordance.required is False
    assert dict(affordance.properties) == {}
    assert affordance.verb_name == "PROPFIND"


def test_first_body_parameter_wins(person_model):
    op = operation("create", "POST", query("dry_run", bool), body("order", Order), body("person", person_model))
    assert locate_body_type(op) is Order
    assert dict(build_affordance(op).properties) == {"sku": str, "quantity": int}


def test_locator_returns_none_without_body():
    assert locate_body_type(operation("list", "POST", query("page", int))) is None


def test_build_is_idempotent(person_model):
    first = build_affordance(operation("create", "POST", body("person", person_model)))
    second = build_affordance(operation("create", "POST", body("person", person_model)))
    assert first == second
    assert hash(first) == hash(second)


def test_affordance_accessors(person_model):
    affordance = build_affordance(operation("create_person", HttpVerb.POST, body("person", person_model)))
    assert affordance.operation_name == "create_person"
    assert affordance.verb is HttpVerb.POST
    assert affordance.verb_name == "POST"
    assert affordance.to_dict() == {
        "operation": "create_person",
        "verb": "POST",
        "required": True,
        "properties": {"name": "str", "age": "int"},
    }


def test_affordance_is_immutable(person_model):
    affordance = build_affordance(operation("create", "POST", body("person", person_model)))
    assert isinstance(affordance.properties, MappingProxyType)
    with pytest.raises(TypeError):
        affordance.properties["extra"] = str
    with pytest.raises(AttributeError):
        affordance.required = False


def test_affordance_copies_properties():
    source = {"name": str}
    affordance = Affordance("create", "POST", True, source)
    source["age"] = int
    assert dict(affordance.properties) == {"name": str}


def test_non_mutating_affordance_cannot_carry_properties():
    with pytest.raises(InvalidAffordanceError):
        Affordance("read", "GET", False, {"name": str})


def test_registry_is_used(registry, person_model):
    registry.register(person_model, {"full_name": str})
    builder = AffordanceBuilder(registry=registry)
    assert dict(builder.build(operation("create", "POST", body("p", person_model))).properties) == {"full_name": str}


def test_hook_receives_events(person_model):
    events = []
    builder = AffordanceBuilder(hook=lambda event, data: events.append((event, data)))
    builder.build(operation("create", "POST", body("person", person_model)))
    builder.build(operation("ping", "POST"))
    builder.build(operation("read", "GET"))

    names = [event for event, _ in events]
    assert names == ["body.located", "affordance.built", "body.absent", "affordance.built", "affordance.built"]
    assert events[0][1]["type"] is person_model
    assert events[1][1]["properties"] == ["name", "age"]


def test_failing_hook_does_not_change_result(person_model):
    def hook(event, data):
        raise RuntimeError("collector down")

    with_hook = AffordanceBuilder(hook=hook).build(operation("create", "POST", body("person", person_model)))
    assert with_hook == build_affordance(operation("create", "POST", body("person", person_model)))


def test_operation_descriptor_validation(person_model):
    op = Operation(name="create", verb="post", parameters=[{"name": "person", "annotation": person_model, "role": "body"}])
    assert op.verb is HttpVerb.POST
    assert op.parameters[0].role is ParameterRole.BODY
    assert op.body_parameters() == (op.parameters[0],)
    with pytest.raises(ValidationError):
        Operation(name="create", verb="POST", parameters=[{"name": "x", "role": "form"}])
