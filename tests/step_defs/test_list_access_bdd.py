"""
BDD step definitions for the list access decision (pytest-bdd).
"""

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from minitracker.core.access import can_read, can_write, decide_access

scenarios("../features/list_access.feature")


@pytest.fixture
def context():
    return {}


@given(parsers.parse("a list owned by user {owner_id:d} that is {visibility}"))
def a_list(context, owner_id, visibility):
    context["owner_id"] = owner_id
    context["is_public"] = visibility == "public"


@when(parsers.parse("{requester} asks for it"))
def requester_asks(context, requester):
    requester_id = None if requester == "anonymous" else int(requester.split()[-1])
    context["decision"] = decide_access(context["owner_id"], context["is_public"], requester_id)


@then(parsers.parse('the decision is "{decision}"'))
def decision_is(context, decision):
    assert context["decision"].value == decision


@then(parsers.parse("reading is {read} and writing is {write}"))
def read_write(context, read, write):
    assert can_read(context["decision"]) is (read == "allowed")
    assert can_write(context["decision"]) is (write == "allowed")
