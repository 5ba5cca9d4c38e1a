from gesture_four.ui.layout import compute_board_geometry


def test_geometry_for_default_window():
    geo = compute_board_geometry(1280, 720, 6, 7)
    assert geo.cell_size == 90.0
    assert geo.disc_radius == 36.0
    assert geo.start_x == 325.0
    assert geo.start_y == 135.0
    assert geo.cell_center(5, 3) == (640.0, 630.0)
    assert geo.cell_center(0, 0) == (370.0, 180.0)


def test_narrow_window_is_width_bound():
    geo = compute_board_geometry(700, 1000, 6, 7)
    assert geo.cell_size == 100.0
    assert geo.start_x == 0.0


def test_column_at_maps_pixels_and_reports_out_of_range():
    geo = compute_board_geometry(1280, 720, 6, 7)
    assert geo.column_at(325.0) == 0
    assert geo.column_at(414.9) == 0
    assert geo.column_at(415.0) == 1
    assert geo.column_at(954.9) == 6
    assert geo.column_at(955.0) == 7
    assert geo.column_at(100.0) < 0


def test_home_positions_per_player():
    geo = compute_board_geometry(1280, 720, 6, 7)
    assert geo.home_position(1, initial=True) == (960.0, 45.0)
    assert geo.home_position(2, initial=True) == (320.0, 45.0)
    assert geo.home_position(2) == (320.0, 41.0)
