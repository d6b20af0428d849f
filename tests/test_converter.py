import numpy as np
from PIL import Image

from qoicodec import QOI, Colorspace, QOIDecoder
from qoicodec.converter import main, png_to_qoi, qoi_to_png


def write_png(path, pixel_data):
    Image.fromarray(pixel_data).save(str(path))


def test_png_to_qoi_and_back(tmp_path):
    rgba = np.random.default_rng(5).integers(0, 256, size=(7, 9, 4), dtype=np.uint8)
    rgba[:3] = (10, 20, 30, 255)
    write_png(tmp_path / "in.png", rgba)

    size = png_to_qoi(str(tmp_path / "in.png"), str(tmp_path / "out.qoi"))
    assert size == (tmp_path / "out.qoi").stat().st_size

    decoded = qoi_to_png(str(tmp_path / "out.qoi"), str(tmp_path / "back.png"))
    assert decoded.has_alpha
    assert np.array_equal(np.array(Image.open(tmp_path / "back.png")), rgba)


def test_main_export_options(tmp_path):
    rgba = np.full((2, 3, 4), 100, dtype=np.uint8)
    write_png(tmp_path / "in.png", rgba)

    status = main(
        [str(tmp_path / "in.png"), str(tmp_path / "out.qoi"), "--no-alpha", "--colorspace", "linear"]
    )

    assert status == 0
    data = (tmp_path / "out.qoi").read_bytes()
    assert data[:4] == QOI.QOI_MAGIC
    decoded = QOIDecoder.decode(data)
    assert decoded.has_alpha is False
    assert decoded.colorspace is Colorspace.LINEAR
    assert set(decoded.pixels) == {(100, 100, 100, 255)}


def test_main_reports_codec_errors(tmp_path, capsys):
    (tmp_path / "bad.qoi").write_bytes(b"qoif" + b"\x00" * 10)

    status = main([str(tmp_path / "bad.qoi"), str(tmp_path / "out.png")])

    assert status == 1
    assert "could not be converted" in capsys.readouterr().err
    assert not (tmp_path / "out.png").exists()


def test_main_reports_missing_file(tmp_path, capsys):
    status = main([str(tmp_path / "missing.qoi"), str(tmp_path / "out.png")])

    assert status == 1
    assert "Could not read or write file" in capsys.readouterr().err
