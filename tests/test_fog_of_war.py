from game.fog_of_war import FogOfWar


def test_default_radius_and_state():
    fog = FogOfWar()
    assert fog.radius == 3
    assert fog.enabled


def test_edge_of_radius_is_visible():
    fog = FogOfWar(radius=2)
    assert fog.is_visible(2, 0, 0, 0)
    assert fog.is_visible(0, 2, 0, 0)
    assert not fog.is_visible(2, 1, 0, 0)


def test_toggle_returns_new_state():
    fog = FogOfWar(enabled=False)
    assert fog.is_visible(100, 100, 0, 0)
    assert fog.toggle() is True
    assert not fog.is_visible(100, 100, 0, 0)
    assert fog.toggle() is False


def test_visible_cells_forms_disc():
    fog = FogOfWar(radius=1)
    cells = fog.visible_cells(5, 5, 2, 2)
    assert sorted(cells) == [(1, 2), (2, 1), (2, 2), (2, 3), (3, 2)]


def test_zero_radius_sees_only_player_cell():
    fog = FogOfWar(radius=0)
    assert fog.visible_cells(3, 3, 0, 0) == [(0, 0)]
