import json

import pytest

from workbench.servers import Server, ServerList, describe_values

SAMPLE = ServerList(
    [
        Server(server_name="Sahnghai_VPN", server_ip="127.0.0.1"),
        Server(server_name="Beijing_VPN", server_ip="127.0.0.2"),
    ]
)


def test_to_json_exact_output():
    assert SAMPLE.to_json() == (
        '{"servers":[{"serverName":"Sahnghai_VPN","serverIP":"127.0.0.1"},'
        '{"serverName":"Beijing_VPN","serverIP":"127.0.0.2"}]}'
    )


def test_round_trip():
    assert ServerList.from_json(SAMPLE.to_json()) == SAMPLE


def test_empty_list_round_trip():
    text = ServerList().to_json()
    assert json.loads(text) == {"servers": None}
    assert ServerList.from_json(text) == ServerList()


def test_from_json_case_insensitive_keys():
    text = (
        '{"servers":[{"ServerName":"Shanhai_VPN","ServerIP":"127.0.0.1"},'
        '{"ServerName":"Beijing_VPN","ServerIP":"127.0.0.2"}]}'
    )
    result = ServerList.from_json(text)
    assert result.servers == [
        Server("Shanhai_VPN", "127.0.0.1"),
        Server("Beijing_VPN", "127.0.0.2"),
    ]


def test_html_characters_escaped():
    text = ServerList([Server("<a&b>", "x")]).to_json()
    assert "\\u003ca\\u0026b\\u003e" in text
    assert ServerList.from_json(text).servers[0].server_name == "<a&b>"


def test_from_json_wrong_type_raises():
    with pytest.raises(TypeError):
        ServerList.from_json('{"servers": [{"ServerName": 5}]}')


def test_from_json_invalid_raises():
    with pytest.raises(ValueError):
        ServerList.from_json("{not json")


def test_describe_values():
    text = '{"Name":"Wednesday","Age":6,"Parents":["Gomez","Morticia"]}'
    assert describe_values(text) == [
        "Name is string Wednesday",
        "Age is float64 6",
        "Parents is an array:",
        "0 Gomez",
        "1 Morticia",
    ]


def test_describe_values_unknown_type():
    lines = describe_values('{"flag": true}')
    assert lines == ["flag is of a type I don't know how to handle"]


def test_describe_values_requires_object():
    with pytest.raises(TypeError):
        describe_values("[1, 2]")