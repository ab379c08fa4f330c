import numpy as np
import pytest

from shadowdemo.transforms import look_at, normalize, ortho


def _apply(matrix, point):
    result = matrix @ np.array([*point, 1.0])
    return result[:3] / result[3]


def test_normalize_gives_unit_length():
    v = normalize([3.0, -7.0, 2.5])
    assert np.linalg.norm(v) == pytest.approx(1.0)


def test_normalize_keeps_direction():
    v = normalize([0.0, 0.0, -4.0])
    assert np.allclose(v, [0.0, 0.0, -1.0])


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        normalize([0.0, 0.0, 0.0])


def test_look_at_moves_eye_to_origin():
    eye = (-2.0, 4.0, -1.0)
    view = look_at(eye, (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert np.allclose(_apply(view, eye), [0.0, 0.0, 0.0])


def test_look_at_puts_center_on_negative_z():
    eye = np.array([1.0, 2.0, 3.0])
    center = np.array([4.0, -1.0, 0.5])
    view = look_at(eye, center, (0.0, 1.0, 0.0))
    mapped = _apply(view, center)
    assert np.allclose(mapped[:2], [0.0, 0.0])
    assert mapped[2] == pytest.approx(-np.linalg.norm(center - eye))


def test_look_at_rotation_is_orthonormal():
    view = look_at((5.0, 1.0, -3.0), (0.0, 0.5, 0.0), (0.0, 1.0, 0.0))
    rotation = view[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.identity(3))
    assert np.allclose(view[3], [0.0, 0.0, 0.0, 1.0])


def test_look_at_same_point_raises():
    with pytest.raises(ValueError):
        look_at((1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (0.0, 1.0, 0.0))


def test_ortho_maps_volume_corners_to_clip_cube():
    projection = ortho(-10.0, 10.0, -10.0, 10.0, 1.0, 7.5)
    assert np.allclose(_apply(projection, (-10.0, -10.0, -1.0)), [-1.0, -1.0, -1.0])
    assert np.allclose(_apply(projection, (10.0, 10.0, -7.5)), [1.0, 1.0, 1.0])


def test_ortho_asymmetric_volume():
    projection = ortho(0.0, 4.0, 2.0, 6.0, 0.5, 10.0)
    assert np.allclose(_apply(projection, (0.0, 2.0, -0.5)), [-1.0, -1.0, -1.0])
    assert np.allclose(_apply(projection, (4.0, 6.0, -10.0)), [1.0, 1.0, 1.0])


def test_ortho_degenerate_volume_raises():
    with pytest.raises(ValueError):
        ortho(1.0, 1.0, -1.0, 1.0, 0.1, 10.0)