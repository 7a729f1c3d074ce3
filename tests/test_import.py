"""Test basic imports from the package."""


def test_main_import():
    """Test that the main package imports successfully."""
    import tx_decoder
    assert tx_decoder.__version__ == "0.1.0"
    assert hasattr(tx_decoder, 'decode_cardano_transaction')
    assert hasattr(tx_decoder, 'compute_transaction_hash')


def test_codec_import():
    """Test codec module imports."""
    import tx_decoder.codec as codec
    assert hasattr(codec, 'ByteReader')
    assert hasattr(codec, 'CborReader')
    assert hasattr(codec, 'CborWriter')


def test_errors_import():
    """Test error types are exported."""
    import tx_decoder
    assert issubclass(tx_decoder.UnexpectedEofError, tx_decoder.DecoderError)
    assert issubclass(tx_decoder.MalformedInputError, tx_decoder.DecoderError)
    assert issubclass(tx_decoder.DecoderError, Exception)
