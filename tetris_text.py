
"""ASCII frame: the board, the falling piece, score and level"""
EMPTY, FILLED = ".", "#"
HELP = "asd to move, w to rotate, q to quit"


def render_text(game) -> str:
    grid = [[FILLED if c else EMPTY for c in row] for row in game.board]
    for x, y in game.cells():
        # a piece may still poke above the top, or sit off-grid after a rotation
        if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
            grid[y][x] = FILLED
    out = ["".join(r) for r in grid]
    out.append(f"Score: {game.score}")
    out.append(f"Level: {game.level}")
    out.append(HELP)
    return "\n".join(out)
