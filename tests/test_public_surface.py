"""Test public API surface - ensure root exports work and stay stable."""

import types


def test_root_exports_core_functions():
    """Test that linkrecord exports encode/decode and the block helpers."""
    import linkrecord

    for name in ("encode", "decode", "encode_block", "decode_block", "default_cid"):
        assert isinstance(getattr(linkrecord, name), types.FunctionType), name


def test_all_names_resolve():
    import linkrecord

    missing = [name for name in linkrecord.__all__ if not hasattr(linkrecord, name)]
    assert not missing, f"__all__ names not importable: {missing}"


def test_root_objects_are_kernel_objects():
    """Root re-exports must be the same objects, not copies."""
    import linkrecord
    from linkrecord.kernel.codec import decode, encode
    from linkrecord.kernel.record import Record

    assert linkrecord.encode is encode
    assert linkrecord.decode is decode
    assert linkrecord.Record is Record


def test_error_taxonomy_exported():
    import linkrecord

    for name in ("NotAMap", "MissingOrWrongTypeField", "InvalidDateTime", "MalformedMetadata"):
        cls = getattr(linkrecord, name)
        assert issubclass(cls, linkrecord.RecordDecodeError)


def test_codes_are_strings():
    from linkrecord import DecodeErrorCode

    assert DecodeErrorCode.NOT_A_MAP == "NOT_A_MAP"
    assert all(code.value == code.name for code in DecodeErrorCode)


def test_end_to_end_from_root():
    import linkrecord

    record = linkrecord.Record.default()
    record.update(metadata={"note": "hello"})
    assert linkrecord.decode(linkrecord.encode(record)) == record
    assert linkrecord.decode_block(linkrecord.encode_block(record)) == record
