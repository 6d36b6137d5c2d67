import numpy as np
import pytest

from skyroute.local_planning import (
    TreeNode,
    color_image_index,
    conic_kernel,
    generate_cost_image,
    pad_polar_matrix,
    setpoint_from_path,
    smooth_polar_matrix,
)


def test_tree_node_defaults():
    node = TreeNode()
    assert node.origin == 0
    assert node.total_cost == 0.0
    assert node.heuristic == 0.0
    assert node.closed is False
    assert node.depth == 0
    assert np.array_equal(node.position, np.zeros(3))
    assert np.array_equal(node.velocity, np.zeros(3))


def test_tree_node_set_costs_and_construction():
    node = TreeNode(4, [1.0, 2.0, 3.0], [0.5, 0.0, 0.0])
    node.set_costs(2.5, 7.0)
    assert node.heuristic == 2.5
    assert node.total_cost == 7.0
    assert node.origin == 4
    assert np.array_equal(node.position, [1.0, 2.0, 3.0])
    assert np.array_equal(node.velocity, [0.5, 0.0, 0.0])


@pytest.mark.parametrize("radius", [0, 1, 2, 5])
def test_conic_kernel_shape_and_peak(radius):
    kernel = conic_kernel(radius)
    assert len(kernel) == 2 * radius + 1
    assert kernel[radius] == pytest.approx(1.0)
    assert np.allclose(kernel, kernel[::-1])
    assert np.all(kernel > 0)
    assert np.all(np.diff(kernel[: radius + 1]) > 0)


def test_conic_kernel_radius_zero():
    assert conic_kernel(0).tolist() == [1.0]


def test_pad_polar_matrix_middle_and_wrap():
    matrix = np.arange(24, dtype=float).reshape(4, 6)
    padded = pad_polar_matrix(matrix, 1)
    assert padded.shape == (6, 8)
    assert np.array_equal(padded[1:5, 1:7], matrix)
    # left and right borders wrap in azimuth
    assert np.array_equal(padded[:, 0], padded[:, 6])
    assert np.array_equal(padded[:, 7], padded[:, 1])
    # top border takes the opposite half of the first row
    assert np.array_equal(padded[0, 1:4], matrix[0, 3:6])
    assert np.array_equal(padded[0, 4:7], matrix[0, 0:3])
    # bottom border likewise from the last row
    assert np.array_equal(padded[5, 1:4], matrix[3, 3:6])
    assert np.array_equal(padded[5, 4:7], matrix[3, 0:3])


def test_pad_polar_matrix_zero_padding_is_identity():
    matrix = np.arange(12, dtype=float).reshape(3, 4)
    assert np.array_equal(pad_polar_matrix(matrix, 0), matrix)


def test_pad_polar_matrix_rejects_odd_columns():
    with pytest.raises(ValueError):
        pad_polar_matrix(np.zeros((4, 5)), 1)


def test_smooth_polar_matrix_radius_zero_is_identity():
    matrix = np.arange(24, dtype=float).reshape(4, 6)
    assert np.allclose(smooth_polar_matrix(matrix, 0), matrix)


def test_smooth_polar_matrix_constant_input():
    matrix = np.full((6, 8), 2.0)
    radius = 2
    result = smooth_polar_matrix(matrix, radius)
    assert result.shape == matrix.shape
    assert np.allclose(result, 2.0 * conic_kernel(radius).sum() ** 2)


def test_generate_cost_image_layout():
    cost = np.array([[0.0, 1.0], [2.0, 4.0]])
    dist = np.array([[4.0, 0.0], [1.0, 2.0]])
    image = generate_cost_image(cost, dist)
    assert len(image) == 3 * cost.size
    rows, cols = cost.shape
    for e in range(rows):
        for z in range(cols):
            assert image[color_image_index(e, z, 2, rows, cols)] == 0
    assert image[color_image_index(0, 0, 0, rows, cols)] == 255
    assert image[color_image_index(1, 1, 1, rows, cols)] == 255
    assert image[color_image_index(0, 0, 1, rows, cols)] == 0


def test_generate_cost_image_shape_mismatch():
    with pytest.raises(ValueError):
        generate_cost_image(np.zeros((2, 2)), np.zeros((2, 3)))


def test_color_image_index_covers_all_bytes_once():
    rows, cols = 3, 4
    indices = {
        color_image_index(e, z, c, rows, cols)
        for e in range(rows)
        for z in range(cols)
        for c in range(3)
    }
    assert indices == set(range(3 * rows * cols))


def test_setpoint_from_short_paths():
    assert setpoint_from_path([], 0.0, 1.0, 1.0) is None
    assert setpoint_from_path([[1.0, 2.0, 3.0]], 0.0, 1.0, 1.0) is None
    result = setpoint_from_path([[1.0, 2.0, 3.0], [0.0, 0.0, 0.0]], 0.0, 1.0, 5.0)
    assert np.array_equal(result, [1.0, 2.0, 3.0])


def test_setpoint_along_straight_path():
    path = [[10.0, 0.0, 0.0], [5.0, 0.0, 0.0], [0.0, 0.0, 0.0]]
    result = setpoint_from_path(path, 0.0, 2.0, 1.0)
    assert np.allclose(result, [7.0, 0.0, 0.0])


def test_setpoint_crosses_into_next_segment():
    path = [[0.0, 5.0, 0.0], [0.0, 0.0, 0.0], [-5.0, 0.0, 0.0], [-9.0, 0.0, 0.0]]
    result = setpoint_from_path(path, 0.0, 1.0, 7.0)
    assert result is not None
    assert result[0] == pytest.approx(0.0)
    assert 0.0 < result[1] < 5.0


def test_setpoint_past_end_of_path():
    path = [[10.0, 0.0, 0.0], [5.0, 0.0, 0.0], [0.0, 0.0, 0.0]]
    assert setpoint_from_path(path, 0.0, 1.0, 100.0) is None