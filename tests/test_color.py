from utils.color import darker, hex_to_rgb, lighter


def test_hex_to_rgb():
    assert hex_to_rgb('#F97316') == (249, 115, 22)
    assert hex_to_rgb('fff') == (255, 255, 255)
    assert hex_to_rgb('#12345') == (0, 0, 0)
    assert hex_to_rgb('#GGGGGG', fallback=(1, 2, 3)) == (1, 2, 3)


def test_shades_are_clamped():
    assert lighter((250, 10, 100)) == (255, 50, 140)
    assert darker((250, 10, 100)) == (210, 0, 60)
