"""Tests for command line parsing."""

import ipaddress

import pytest

from nvr_check.cli import parse_command_line


class TestParseCommandLine:
    def test_all_options(self):
        target = parse_command_line(["-s192.168.1.20", "-uadmin", "-ppa55", "-c12"])

        assert target.address == ipaddress.ip_address("192.168.1.20")
        assert target.username == "admin"
        assert target.password == "pa55"
        assert target.camera_count == 12

    def test_defaults_when_only_server_given(self):
        target = parse_command_line(["-s10.0.0.1"])

        assert target.username == ""
        assert target.password == ""
        assert target.camera_count == 0

    @pytest.mark.parametrize(
        "argv",
        [
            [],
            ["-uadmin", "-ppass", "-c4"],
            ["-snot-an-ip"],
            ["-s"],
            ["-s", "10.0.0.1"],
            ["s10.0.0.1"],
            ["-s300.1.1.1"],
        ],
    )
    def test_missing_or_invalid_server_returns_none(self, argv):
        assert parse_command_line(argv) is None

    def test_invalid_count_keeps_default(self):
        target = parse_command_line(["-s10.0.0.1", "-cmany"])
        assert target.camera_count == 0

    def test_count_out_of_16_bit_range_is_ignored(self):
        target = parse_command_line(["-s10.0.0.1", "-c5", "-c40000"])
        assert target.camera_count == 5

    def test_invalid_server_keeps_earlier_valid_one(self):
        target = parse_command_line(["-s10.0.0.1", "-sbogus"])
        assert target.address == ipaddress.ip_address("10.0.0.1")

    def test_later_options_override_earlier(self):
        target = parse_command_line(["-s10.0.0.1", "-uone", "-utwo", "-s10.0.0.2"])

        assert target.address == ipaddress.ip_address("10.0.0.2")
        assert target.username == "two"

    def test_unknown_and_empty_options_are_ignored(self):
        target = parse_command_line(["-x42", "-u", "--verbose", "-s10.0.0.1", "-uadmin"])

        assert target.address == ipaddress.ip_address("10.0.0.1")
        assert target.username == "admin"

    @pytest.mark.parametrize("value", ["1_0", "\u0661\u0662", "0x10", "1.5", "+"])
    def test_count_must_be_ascii_digits(self, value):
        target = parse_command_line(["-s10.0.0.1", f"-c{value}"])
        assert target.camera_count == 0

    def test_count_accepts_sign_and_surrounding_spaces(self):
        assert parse_command_line(["-s10.0.0.1", "-c+7"]).camera_count == 7
        assert parse_command_line(["-s10.0.0.1", "-c 7 "]).camera_count == 7

    def test_password_value_is_taken_verbatim(self):
        target = parse_command_line(["-s10.0.0.1", "-p-s=x y"])
        assert target.password == "-s=x y"

    def test_ipv6_address(self):
        target = parse_command_line(["-sfe80::1"])
        assert target.address == ipaddress.ip_address("fe80::1")
