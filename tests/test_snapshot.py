"""Tests for snapshot rendering, file naming and the write-once rule."""

import ipaddress
import logging
import xml.etree.ElementTree as ET

import pytest

from nvr_check.models import Device, Entity
from nvr_check.snapshot import build_snapshot, write_snapshot_if_absent
from nvr_check.utils.paths import get_snapshot_path, snapshot_file_name


class TestBuildSnapshot:
    def test_one_element_per_device(self, devices):
        content = build_snapshot(devices)

        assert content == "<root><id3>True</id3><id7>False</id7></root>"

    def test_no_xml_declaration(self, devices):
        assert not build_snapshot(devices).startswith("<?xml")

    def test_uses_first_entity_logical_id(self):
        device = Device(entities=[Entity(logical_id=11), Entity(logical_id=12)], connected=True)

        root = ET.fromstring(build_snapshot([device]))

        assert [child.tag for child in root] == ["id11"]

    def test_empty_device_list(self):
        root = ET.fromstring(build_snapshot([]))

        assert root.tag == "root"
        assert len(root) == 0

    def test_device_without_entities_is_skipped(self):
        devices = [Device(entities=[], connected=True), Device(entities=[Entity(1)], connected=True)]

        root = ET.fromstring(build_snapshot(devices))

        assert [child.tag for child in root] == ["id1"]


class TestSnapshotFileName:
    @pytest.mark.parametrize(
        "address, expected",
        [
            ("10.0.0.1", "10001.xml"),
            ("10.0.0.11", "100011.xml"),
            ("192.168.1.100", "1921681100.xml"),
        ],
    )
    def test_dots_are_removed(self, address, expected):
        assert snapshot_file_name(ipaddress.ip_address(address)) == expected

    def test_distinct_addresses_can_collide(self):
        first = snapshot_file_name(ipaddress.ip_address("1.0.0.11"))
        second = snapshot_file_name(ipaddress.ip_address("10.0.1.1"))

        assert first == second == "10011.xml"

    def test_path_is_inside_directory(self, temp_storage):
        path = get_snapshot_path(ipaddress.ip_address("10.0.0.1"), temp_storage)
        assert path == temp_storage / "10001.xml"


class TestWriteSnapshotIfAbsent:
    @pytest.mark.asyncio
    async def test_writes_new_file(self, temp_storage, devices):
        path = temp_storage / "10001.xml"

        written = await write_snapshot_if_absent(path, devices)

        assert written is True
        assert path.read_text(encoding="utf-8") == build_snapshot(devices)

    @pytest.mark.asyncio
    async def test_existing_file_is_left_untouched(self, temp_storage, devices):
        path = temp_storage / "10001.xml"
        path.write_text("<root><id1>True</id1></root>", encoding="utf-8")

        written = await write_snapshot_if_absent(path, devices)

        assert written is False
        assert path.read_text(encoding="utf-8") == "<root><id1>True</id1></root>"


class TestSnapshotLogging:
    def test_skipped_device_is_logged_as_error(self, caplog):
        with caplog.at_level(logging.ERROR):
            build_snapshot([Device(entities=[], connected=True)])

        assert "Skipping device without a logical id" in caplog.text
        assert caplog.records[-1].levelno == logging.ERROR
