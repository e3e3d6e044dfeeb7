#!/usr/bin/env python3
# Render dungeon text dumps (dungeon_tool.py output) to PNGs using Pillow.
# Debug aid only: one flat-coloured square per tile, glyph drawn on top.

import argparse, os
from PIL import Image, ImageDraw, ImageFont
from dungeongen.dump import parse_dump
from dungeongen.tiles import Tile, glyph_for

COLORS = {
    Tile.UNUSED:      (  0,   0,   0, 255),
    Tile.FLOOR:       (200, 190, 160, 255),
    Tile.CORRIDOR:    (150, 140, 120, 255),
    Tile.WALL:        ( 80,  80,  80, 255),
    Tile.CLOSED_DOOR: (140,  90,  30, 255),
    Tile.OPEN_DOOR:   (200, 150,  80, 255),
    Tile.EXIT:        (255, 220,   0, 255),
    Tile.ENTRANCE:    (  0, 200, 255, 255),
}

def read_dump(path):
    with open(path, encoding="utf-8") as f:
        return parse_dump(f.read())

def render_grid(dump_path, out_png, tile_size=12, margin=0, glyphs=True):
    grid = read_dump(dump_path)
    w = grid.width * tile_size + 2*margin
    h = grid.height * tile_size + 2*margin
    canvas = Image.new("RGBA", (w, h), COLORS[Tile.UNUSED])
    draw = ImageDraw.Draw(canvas)
    font = ImageFont.load_default()
    for y in range(grid.height):
        for x in range(grid.width):
            tile = grid.get(x, y)
            if tile == Tile.UNUSED:
                continue
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), fill=COLORS[tile])
            if glyphs and tile in (Tile.CLOSED_DOOR, Tile.OPEN_DOOR, Tile.EXIT, Tile.ENTRANCE):
                text = glyph_for(tile)
                tw = draw.textlength(text, font=font)
                draw.text((x0 + (tile_size - tw) / 2, y0), text, fill=(0, 0, 0, 255), font=font)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("dumps", nargs="+", help="Dump files written by dungeon_tool.py")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=12, help="Tile size in pixels")
    ap.add_argument("--no-glyphs", action="store_true", help="Colour only, skip door/stair glyphs")
    args = ap.parse_args()

    for path in args.dumps:
        name = os.path.splitext(os.path.basename(path))[0]
        png = os.path.join(args.outdir, f"{name}.png")
        render_grid(path, png, tile_size=args.tile, glyphs=not args.no_glyphs)
    print(f"Wrote {len(args.dumps)} PNGs to {args.outdir}")

if __name__ == "__main__":
    main()
