"""Server lists encoded as JSON, and a description of arbitrary JSON objects."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


@dataclass
class Server:
    """A named server and its IP address."""

    server_name: str = ""
    server_ip: str = ""


def _escape_html(text: str) -> str:
    # These characters only ever appear inside JSON strings, so escaping them is safe.
    return (
        text.replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("&", "\\u0026")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )


def _lookup(data: dict[str, Any], name: str) -> Any:
    """Find a key case-insensitively, preferring an exact match."""
    if name in data:
        return data[name]
    wanted = name.casefold()
    found = None
    for key, value in data.items():
        if key.casefold() == wanted:
            found = value
    return found


def _string_field(data: dict[str, Any], name: str) -> str:
    value = _lookup(data, name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"cannot decode {type(value).__name__} into string field {name}")
    return value


@dataclass
class ServerList:
    """An ordered collection of servers."""

    servers: list[Server] = field(default_factory=list)

    def to_json(self) -> str:
        """Encode as compact JSON; an empty list is written as ``null``."""
        entries = [
            {"serverName": server.server_name, "serverIP": server.server_ip}
            for server in self.servers
        ]
        payload = {"servers": entries or None}
        return _escape_html(json.dumps(payload, ensure_ascii=False, separators=(",", ":")))

    @classmethod
    def from_json(cls, text: str | bytes) -> ServerList:
        """Decode a server list, matching keys case-insensitively."""
        data = json.loads(text)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise TypeError(f"cannot decode {type(data).__name__} into a server list")
        raw = _lookup(data, "servers")
        if raw is None:
            return cls()
        if not isinstance(raw, list):
            raise TypeError(f"cannot decode {type(raw).__name__} into a list of servers")
        servers = []
        for item in raw:
            if item is None:
                servers.append(Server())
                continue
            if not isinstance(item, dict):
                raise TypeError(f"cannot decode {type(item).__name__} into a server")
            servers.append(
                Server(
                    server_name=_string_field(item, "ServerName"),
                    server_ip=_string_field(item, "ServerIP"),
                )
            )
        return cls(servers)


def _format_number(number: float) -> str:
    """Format a float with the shortest digits, using an exponent only for large or tiny values."""
    if number == 0:
        return "-0" if math.copysign(1.0, number) < 0 else "0"
    decimal = Decimal(repr(number)).normalize()
    exponent = decimal.adjusted()
    if -4 <= exponent < 21:
        return format(decimal, "f")
    sign, digits, _ = decimal.as_tuple()
    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += "." + "".join(str(digit) for digit in digits[1:])
    exponent_sign = "+" if exponent >= 0 else "-"
    return f"{'-' if sign else ''}{mantissa}e{exponent_sign}{abs(exponent):02d}"


def _format_value(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return _format_number(float(value))
    if isinstance(value, list):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    if isinstance(value, dict):
        inner = " ".join(f"{key}:{_format_value(value[key])}" for key in sorted(value))
        return f"map[{inner}]"
    return str(value)


def describe_values(text: str | bytes) -> list[str]:
    """Describe the type and value of each member of a JSON object, one line each."""
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, str):
            lines.append(f"{key} is string {value}")
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            lines.append(f"{key} is float64 {_format_number(float(value))}")
        elif isinstance(value, list):
            lines.append(f"{key} is an array:")
            lines.extend(f"{index} {_format_value(item)}" for index, item in enumerate(value))
        else:
            lines.append(f"{key} is of a type I don't know how to handle")
    return lines