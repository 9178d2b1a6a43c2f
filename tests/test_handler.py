# Copyright 2025 Softwell S.r.l.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for handler normalization."""

import pytest
from pydantic import ValidationError

from route_groups import (
    Around,
    Group,
    Handler,
    HandlerCannotBeGroup,
    InvalidHandlerSpecification,
    RespondsTo,
)
from route_groups.core.handler import callable_name, display_name, normalize_handler, split_around


def handler_fn():
    return "ok"


def test_bare_callable_becomes_then_handler():
    handler = normalize_handler(handler_fn)
    assert handler == Handler(name=None, responds_to=RespondsTo.THEN, callback=handler_fn)


def test_handler_instance_passes_through():
    original = Handler(name="h", responds_to=RespondsTo.CATCH, callback=handler_fn)
    assert normalize_handler(original) is original


def test_mapping_is_validated():
    handler = normalize_handler({"name": "err", "responds_to": "catch", "callback": handler_fn})
    assert handler.name == "err"
    assert handler.responds_to is RespondsTo.CATCH
    assert handler.callback is handler_fn


def test_mapping_defaults_to_then():
    assert normalize_handler({"callback": handler_fn}).responds_to is RespondsTo.THEN


def test_bad_responds_to_rejected():
    with pytest.raises(InvalidHandlerSpecification, match="responds_to: 'finally'"):
        normalize_handler({"responds_to": "finally", "callback": handler_fn})


def test_mapping_without_callback_rejected():
    with pytest.raises(InvalidHandlerSpecification, match="callback"):
        normalize_handler({"name": "x"})


def test_mapping_with_unknown_key_rejected():
    with pytest.raises(InvalidHandlerSpecification):
        normalize_handler({"respondsTo": "then", "callback": handler_fn})


def test_non_callable_rejected():
    with pytest.raises(InvalidHandlerSpecification) as exc_info:
        normalize_handler(42)
    assert exc_info.value.value == 42


def test_group_rejected():
    group = Group()
    with pytest.raises(HandlerCannotBeGroup) as exc_info:
        normalize_handler(group)
    assert exc_info.value.handler is group


def test_handler_is_immutable():
    handler = normalize_handler(handler_fn)
    with pytest.raises(ValidationError):
        handler.name = "changed"


def test_split_around_accepts_dataclass_mapping_and_object():
    class Pair:
        before = staticmethod(handler_fn)
        after = staticmethod(handler_fn)

    assert split_around(Around(before=1, after=2)) == (1, 2)
    assert split_around({"before": 1, "after": 2}) == (1, 2)
    assert split_around(Pair()) == (handler_fn, handler_fn)


def test_split_around_missing_half():
    with pytest.raises(InvalidHandlerSpecification, match="after"):
        split_around({"before": handler_fn})
    with pytest.raises(InvalidHandlerSpecification):
        split_around(handler_fn)


def test_display_name_prefers_name():
    assert display_name(Handler(name="auth", callback=handler_fn)) == "auth"
    assert display_name(Handler(callback=handler_fn)) == "handler_fn"


def test_callable_name_falls_back_to_repr():
    class Marker:
        def __call__(self):
            return None

        def __repr__(self):
            return "<marker>"

    assert callable_name(handler_fn) == "handler_fn"
    assert callable_name(Marker()) == "<marker>"
