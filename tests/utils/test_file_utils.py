from schemadrift.utils.file_utils import detect_file_type


def test_detect_by_extension_json():
    assert detect_file_type("a.json", b"{") == "json"


def test_detect_by_extension_yaml():
    assert detect_file_type("a.yaml", b"x: 1") == "yaml"
    assert detect_file_type("A.YML", b"x: 1") == "yaml"


def test_detect_by_content_fallback():
    assert detect_file_type("noext", b"{\"a\":1}") == "json"
    assert detect_file_type("noext", b"x: 1\n") == "yaml"


def test_detect_unknown():
    assert detect_file_type("noext", b"\x00\x01\x02") == "unknown"
    assert detect_file_type("noext", b"\xff\xfe") == "unknown"
