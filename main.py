
import sys
import pygame
from tetris_config import CONFIG, ROWS, COLS
from tetris_game import Game
from tetris_input import decode_pygame_key
from tetris_render import RenderAssets


def recreate_window(w, h, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((w, h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((w, h), flags)


def wait_for_key(clock):
    while True:
        for e in pygame.event.get():
            if e.type in (pygame.QUIT, pygame.KEYDOWN):
                return
        clock.tick(CONFIG["FPS"])


def main():
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)
    render = RenderAssets(ROWS, COLS, font)
    screen = recreate_window(render.dims.total_w, render.dims.total_h)
    pygame.display.set_caption("Tetris")
    clock = pygame.time.Clock()

    # the window clock paces gravity, so the game itself never sleeps
    game = Game(ROWS, COLS, sleep=None)
    render.rebuild_board_surface(game.board)
    acc = 0

    while not game.over:
        acc += clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                game.handle_input(decode_pygame_key(e.key, e.unicode))

        if acc >= max(game.interval, CONFIG["MIN_INTERVAL_MS"]):
            acc = 0
            game.tick()
            render.rebuild_board_surface(game.board)

        render.draw_frame(screen, game.snapshot())
        pygame.display.flip()

    render.draw_game_over(screen, big_font)
    pygame.display.flip()
    wait_for_key(clock)
    pygame.quit()
    print(f"Game over! Score: {game.score}")


if __name__ == '__main__':
    main()
