"""Tests for reading component status from terraform.tfstate."""

import json
from unittest.mock import patch

import pytest

from tfcomponents.core.state_reader import (
    ComponentStatus,
    StateSummary,
    get_status,
    read_state,
)
from tfcomponents.errors import InternalError, StateFileError


def _write_state(directory, document):
    body = document if isinstance(document, str) else json.dumps(document)
    (directory / "terraform.tfstate").write_text(body)


class TestGetStatus:
    def test_no_state_file_is_destroyed(self, tmp_path):
        assert get_status(str(tmp_path)) == ComponentStatus.DESTROYED

    def test_empty_resources_is_destroyed(self, tmp_path):
        _write_state(tmp_path, {"version": 4, "resources": []})
        assert get_status(str(tmp_path)) == ComponentStatus.DESTROYED

    def test_missing_resources_key_is_destroyed(self, tmp_path):
        _write_state(tmp_path, {"version": 4})
        assert get_status(str(tmp_path)) == ComponentStatus.DESTROYED

    def test_null_resources_is_destroyed(self, tmp_path):
        _write_state(tmp_path, {"resources": None})
        assert get_status(str(tmp_path)) == ComponentStatus.DESTROYED

    def test_one_resource_is_applied(self, tmp_path):
        _write_state(tmp_path, {"resources": [{"type": "x"}]})
        assert get_status(str(tmp_path)) == ComponentStatus.APPLIED

    def test_status_string_values(self):
        assert str(ComponentStatus.APPLIED) == "applied"
        assert str(ComponentStatus.DESTROYED) == "destroyed"


class TestReadState:
    def test_absent(self, tmp_path):
        assert read_state(str(tmp_path)) is None

    def test_summary(self, tmp_path):
        _write_state(tmp_path, {
            "version": 4,
            "terraform_version": "1.5.7",
            "resources": [
                {"mode": "managed", "type": "aws_instance", "name": "web", "instances": []},
                {"mode": "data", "type": "aws_ami", "name": "ubuntu", "instances": []},
            ],
        })
        summary = read_state(str(tmp_path))
        assert summary == StateSummary(resource_types=["aws_instance", "aws_ami"])
        assert summary.resource_count == 2

    def test_resource_without_type(self, tmp_path):
        _write_state(tmp_path, {"resources": [{"name": "web"}]})
        assert read_state(str(tmp_path)).resource_types == [""]


class TestMalformedState:
    @pytest.mark.parametrize("body", [
        "{not json",
        "",
        "[]",
        '{"resources": {}}',
        '{"resources": ["aws_instance"]}',
        '{"resources": [{"type": 42}]}',
    ])
    def test_malformed_is_internal_error(self, tmp_path, body):
        _write_state(tmp_path, body)
        with pytest.raises(StateFileError) as exc_info:
            get_status(str(tmp_path))
        assert isinstance(exc_info.value, InternalError)
        assert exc_info.value.exit_code == 2
        assert exc_info.value.cause is not None

    def test_unreadable_state_file(self, tmp_path):
        _write_state(tmp_path, {"resources": []})
        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(StateFileError) as exc_info:
                read_state(str(tmp_path))
        assert "denied" in str(exc_info.value)

    def test_state_path_is_a_directory(self, tmp_path):
        (tmp_path / "terraform.tfstate").mkdir()
        with pytest.raises(StateFileError):
            read_state(str(tmp_path))
