from PIL import Image

from adungeon.render.image import render_image, save_png, tile_color

def test_render_image_size_and_colors():
    rows = [[0, 1, 2],
            [3, 4, 0]]
    img = render_image(rows, cell_px=3)
    assert img.size == (9, 6)
    assert img.getpixel((0, 0)) == tile_color(0)
    assert img.getpixel((4, 1)) == tile_color(1)
    assert img.getpixel((8, 2)) == tile_color(2)
    assert img.getpixel((1, 4)) == tile_color(3)
    assert img.getpixel((5, 5)) == tile_color(4)

def test_save_png(tmp_path):
    out = tmp_path / "png" / "map.png"
    save_png([[1, 0], [0, 2]], out, cell_px=2)
    with Image.open(out) as img:
        assert img.size == (4, 4)
