import json

import pytest

from nestor.config import PermissionGrant, PolicyInput, ResourceConfig, load_policy_input
from nestor.exceptions import ConfigError
from nestor.resources import ResourceType

from .constants import BUCKET_ARN, TABLE_ARN

DOCUMENT = {
    "resources": [
        {"id": "images", "type": "s3Bucket", "arn": BUCKET_ARN},
        {"id": "users", "type": "dynamoDbTable", "arn": TABLE_ARN},
    ],
    "permissions": [
        {"resourceId": "images", "actions": [{"operation": "read"}, {"operation": "write"}]},
        {"resourceId": "users", "actions": [{"operation": "write"}, {"operation": "write"}]},
    ],
}


def test_resource_from_dict():
    resource = ResourceConfig.from_dict({"id": "images", "type": "s3Bucket", "arn": BUCKET_ARN})

    assert resource == ResourceConfig(id="images", type=ResourceType.S3_BUCKET, arn=BUCKET_ARN)


def test_resource_unknown_type():
    with pytest.raises(ConfigError, match="unknown resource type 'sqsQueue'"):
        ResourceConfig.from_dict({"id": "jobs", "type": "sqsQueue", "arn": "arn"})


def test_resource_missing_arn():
    with pytest.raises(ConfigError, match="resource 'images' is missing required key 'arn'"):
        ResourceConfig.from_dict({"id": "images", "type": "s3Bucket"})


def test_grant_from_dict_keeps_order_and_duplicates():
    grant = PermissionGrant.from_dict(
        {
            "resourceId": "users",
            "actions": [{"operation": "write"}, {"operation": "read"}, {"operation": "write"}],
        }
    )

    assert grant == PermissionGrant(resource_id="users", operations=("write", "read", "write"))


def test_grant_keeps_unknown_operation_names():
    grant = PermissionGrant.from_dict({"resourceId": "images", "actions": [{"operation": "foo"}]})

    assert grant.operations == ("foo",)


def test_grant_with_no_actions():
    grant = PermissionGrant.from_dict({"resourceId": "images", "actions": []})

    assert grant.operations == ()


@pytest.mark.parametrize(
    ("data", "message"),
    [
        ({"actions": []}, "permission is missing required key 'resourceId'"),
        ({"resourceId": "images"}, "missing required key 'actions'"),
        ({"resourceId": "images", "actions": "read"}, "'actions' must be of type list"),
        ({"resourceId": "images", "actions": [{}]}, "action 0 is missing required key"),
        ({"resourceId": "images", "actions": ["read"]}, "action 0 must be an object"),
        ({"resourceId": "images", "actions": [{"operation": 1}]}, "must be of type str"),
        ("images", "permission must be an object"),
    ],
)
def test_grant_invalid_shape(data, message):
    with pytest.raises(ConfigError, match=message):
        PermissionGrant.from_dict(data)


def test_policy_input_from_dict():
    policy_input = PolicyInput.from_dict(DOCUMENT)

    assert [r.id for r in policy_input.resources] == ["images", "users"]
    assert policy_input.permissions[0] == PermissionGrant(
        resource_id="images", operations=("read", "write")
    )


def test_policy_input_defaults_to_empty():
    policy_input = PolicyInput.from_dict({})

    assert policy_input.resources == ()
    assert policy_input.permissions == ()


@pytest.mark.parametrize(
    ("data", "message"),
    [
        ([], "policy input must be an object"),
        ({"resources": {}}, "'resources' must be a list"),
        ({"permissions": "none"}, "'permissions' must be a list"),
        (
            {"resources": [DOCUMENT["resources"][0], DOCUMENT["resources"][0]]},
            "Duplicate resource id: 'images'",
        ),
    ],
)
def test_policy_input_invalid(data, message):
    with pytest.raises(ConfigError, match=message):
        PolicyInput.from_dict(data)


def test_load_policy_input(tmp_path):
    path = tmp_path / "permissions.json"
    path.write_text(json.dumps(DOCUMENT))

    policy_input = load_policy_input(path)

    assert policy_input == PolicyInput.from_dict(DOCUMENT)


def test_load_policy_input_invalid_json(tmp_path):
    path = tmp_path / "permissions.json"
    path.write_text("{not json")

    with pytest.raises(ConfigError, match="Invalid JSON"):
        load_policy_input(path)


def test_load_policy_input_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read policy input"):
        load_policy_input(tmp_path / "missing.json")


def test_load_policy_input_invalid_encoding(tmp_path):
    path = tmp_path / "permissions.json"
    path.write_bytes(b'{"resources": [], "permissions": [], "x": "\xff\xfe"}')

    with pytest.raises(ConfigError, match="Invalid encoding"):
        load_policy_input(path)
