import pytest

from huffproc.compression import Compressor
from huffproc.config_loader import DEFAULTS, load_config
from huffproc.exceptions import TruncatedPayload


@pytest.fixture
def compressor():
    return Compressor(config=DEFAULTS)


def test_bytes_round_trip(compressor, sample_data):
    assert compressor.decompress(compressor.compress(sample_data)) == sample_data


def test_bytearray_accepted(compressor):
    data = bytearray(b"mississippi")
    assert compressor.decompress(compressor.compress(data)) == bytes(data)


def test_rejects_text(compressor):
    with pytest.raises(TypeError):
        compressor.compress("plain text")
    with pytest.raises(TypeError):
        compressor.decompress("plain text")


def test_explicit_arguments_override_config():
    compressor = Compressor(debug=1, chunk_size=7, config=DEFAULTS)
    assert compressor.debug == 1
    assert compressor.chunk_size == 7
    assert compressor.processor.debug == 1


def test_file_round_trip(compressor, sample_data, tmp_path):
    src = tmp_path / "input.bin"
    packed = tmp_path / "input.bin.hf"
    restored = tmp_path / "restored.bin"
    src.write_bytes(sample_data)

    bits = compressor.compress_file(str(src), str(packed))
    assert (bits + 7) // 8 == packed.stat().st_size
    compressor.decompress_file(str(packed), str(restored))
    assert restored.read_bytes() == sample_data


def test_failed_decompress_removes_partial_output(compressor, tmp_path):
    packed = tmp_path / "cut.hf"
    restored = tmp_path / "cut.out"
    packed.write_bytes(compressor.compress(b"This is a test" * 100)[:-1])

    with pytest.raises(TruncatedPayload):
        compressor.decompress_file(str(packed), str(restored))
    assert not restored.exists()


def test_missing_source_file(compressor, tmp_path):
    with pytest.raises(FileNotFoundError):
        compressor.compress_file(str(tmp_path / "nope"), str(tmp_path / "nope.hf"))
    assert not (tmp_path / "nope.hf").exists()


def test_compressor_accepts_config_with_bare_section(tmp_path, sample_data):
    path = tmp_path / "bare.yaml"
    path.write_text("huffman:\n")
    compressor = Compressor(config=load_config(str(path)))
    assert compressor.chunk_size == DEFAULTS["huffman"]["read_chunk_size"]
    assert compressor.decompress(compressor.compress(sample_data)) == sample_data


def test_byte_at_a_time_input_chunks(sample_data):
    compressor = Compressor(chunk_size=1, config=DEFAULTS)
    packed = compressor.compress(sample_data)
    assert packed == Compressor(config=DEFAULTS).compress(sample_data)
    assert compressor.decompress(packed) == sample_data
