"""
Step definitions for DNS Endpoints scenarios.
"""

from behave import given, when, then

from dns_endpoints.core.dns_endpoint import DNSEndpoint
from dns_endpoints.core.endpoint_manager import EndpointManager
from dns_endpoints.core.filters import filter_endpoints_by_owner_id
from dns_endpoints.core.labels import OWNER_LABEL_KEY
from dns_endpoints.core.record_manager import RecordManager
from dns_endpoints.core.targets import Targets
from dns_endpoints.core.endpoint import new_endpoint
from dns_endpoints.parsers.manifest import dump_manifest


def split_targets(text):
    return [t for t in text.split(";") if t]


@given("the following endpoints")
def step_impl(context):
    """Build endpoints from the table."""
    context.endpoints = []
    for row in context.table:
        endpoint = new_endpoint(
            row["dns_name"], row["record_type"], *split_targets(row["targets"])
        )
        assert endpoint is not None
        if row["owner"]:
            endpoint.labels[OWNER_LABEL_KEY] = row["owner"]
        context.endpoints.append(endpoint)


@given("the endpoints are stored in a DNSEndpoint manifest")
def step_impl(context):
    """Write the endpoints to a manifest file."""
    context.manifest_file = context.test_data_dir / "endpoints.yaml"
    resource = DNSEndpoint(name="scenario", namespace="default", endpoints=context.endpoints)
    dump_manifest([resource], str(context.manifest_file))


@given('the targets "{first}" and "{second}"')
def step_impl(context, first, second):
    context.first = Targets(split_targets(first))
    context.second = Targets(split_targets(second))


@when('I filter the endpoints by owner "{owner_id}"')
def step_impl(context, owner_id):
    context.filtered = filter_endpoints_by_owner_id(owner_id, context.endpoints)


@when('I list the endpoints owned by "{owner_id}" from the manifest')
def step_impl(context, owner_id):
    config = {
        "owner_id": owner_id,
        "sources": [{"type": "manifest", "path": str(context.manifest_file)}],
    }
    context.filtered = EndpointManager(config).owned_endpoints()


@when("I resolve the conflicting endpoints")
def step_impl(context):
    context.canonical = RecordManager().resolve_conflict(context.endpoints)


@then("the filtered endpoints are")
def step_impl(context):
    expected = [(row["dns_name"], split_targets(row["targets"])) for row in context.table]
    actual = [(e.dns_name, list(e.targets)) for e in context.filtered]
    assert actual == expected, f"Expected {expected}, got {actual}"


@then('the first targets sort before the second is "{less}"')
def step_impl(context, less):
    expected = less == "true"
    actual = context.first.is_less(context.second)
    assert actual == expected, f"{context.first} < {context.second}: expected {expected}, got {actual}"


@then('the canonical endpoint has targets "{targets}"')
def step_impl(context, targets):
    assert list(context.canonical.targets) == split_targets(targets)
