import io

import pytest

from grayimg.gray_image import ContractError, GrayImage


def test_empty_image():
    img = GrayImage()
    assert img.height == 0
    assert img.width == 0
    assert img.is_empty()
    assert img.tobytes() == b""


def test_sized_image_is_black():
    img = GrayImage(2, 3)
    assert (img.get_height(), img.get_width()) == (2, 3)
    assert img.tobytes() == bytes(6)


def test_from_string():
    img = GrayImage(2, 2, "xoox")
    assert img.rows() == [[255, 0], [0, 255]]


def test_from_string_any_non_o_is_white():
    assert GrayImage(1, 3, "őx?") == GrayImage(1, 3, "xxx")


def test_get_set_pixel():
    img = GrayImage(2, 3)
    img[1, 2] = 77
    assert img[1, 2] == 77
    assert img.tobytes() == bytes([0, 0, 0, 0, 0, 77])


def test_fill_and_resize():
    img = GrayImage(2, 2)
    img.fill(9)
    assert img.tobytes() == bytes([9]*4)
    img.resize(3, 1)
    assert (img.height, img.width) == (3, 1)
    assert img.tobytes() == bytes(3)


def test_equality():
    a = GrayImage(2, 2, "xoox")
    assert a == GrayImage(2, 2, "xoox")
    assert a != GrayImage(2, 2, "oxxo")
    # mismos datos, otras dimensiones
    assert GrayImage(1, 4, "xoox") != GrayImage(2, 2, "xoox")
    assert GrayImage() == GrayImage()


def test_copy_is_independent(im1):
    c = im1.copy()
    c[0, 0] = 0
    assert im1[0, 0] == 255
    assert c != im1


def test_from_rows_and_bytes():
    rows = [[1, 2, 3], [4, 5, 6]]
    img = GrayImage.from_rows(rows)
    assert img.rows() == rows
    assert GrayImage.from_bytes(2, 3, bytes([1, 2, 3, 4, 5, 6])) == img


def test_to_string_and_print(im1):
    im1[2, 2] = 100
    assert im1.to_string() == "xox\nxox\nxx?"
    out = io.StringIO()
    im1.print(file=out)
    assert out.getvalue() == "xox\nxox\nxx?\n"


@pytest.mark.parametrize("h, w", [(0, 3), (3, 0), (-1, 2)])
def test_bad_dimensions(h, w):
    with pytest.raises(ContractError):
        GrayImage(h, w)


def test_bad_data_length():
    with pytest.raises(ContractError):
        GrayImage(2, 2, "xxx")


@pytest.mark.parametrize("y, x", [(3, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_range_access(im1, y, x):
    with pytest.raises(ContractError):
        im1[y, x]
    with pytest.raises(ContractError):
        im1[y, x] = 0


def test_bad_pixel_value(im1):
    with pytest.raises(ContractError):
        im1[0, 0] = 256
    with pytest.raises(ContractError):
        im1.fill(-1)


def test_bad_resize(im1):
    with pytest.raises(ContractError):
        im1.resize(0, 1)


def test_contract_error_is_assertion():
    assert issubclass(ContractError, AssertionError)
