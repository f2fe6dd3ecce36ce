import argparse
import logging
import pygame
from tetris_config import GameConfig
from tetris_game import FrameGate, GameSession
from tetris_input import KeyboardInput
from tetris_layout import compute_dims
from tetris_render import RenderAssets

log = logging.getLogger("tetris")

HOST_FPS = 120  # scheduler cadence; FrameGate trims it to config.frame_ms


def setup_logging(level: str = "info") -> logging.Logger:
    lvl = getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(level=lvl, format="[%(asctime)s] %(levelname)s %(message)s")
    return log


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Falling-block puzzle (pygame).")
    ap.add_argument("--cols", type=int, default=None)
    ap.add_argument("--rows", type=int, default=None)
    ap.add_argument("--cell", type=int, default=None, help="pixel size of a cell")
    ap.add_argument("--gravity-ms", type=float, default=None)
    ap.add_argument("--repeat-ms", type=float, default=None, help="horizontal auto-repeat interval")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--soft-drop-locks", action="store_true", help="lock immediately on soft drop when grounded")
    ap.add_argument("--log-level", type=str, default="info", choices=["debug", "info", "warning", "error"])
    return ap.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> GameConfig:
    overrides = {
        "COLS": args.cols,
        "ROWS": args.rows,
        "CELL_SIZE": args.cell,
        "GRAVITY_MS": args.gravity_ms,
        "MOVE_REPEAT_MS": args.repeat_ms,
        "SEED": args.seed,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if args.soft_drop_locks:
        overrides["SOFT_DROP_LOCKS"] = True
    return GameConfig.from_dict(overrides)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def run(config: GameConfig):
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims(config)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    gate = FrameGate(config.frame_ms)
    keyboard = KeyboardInput()
    session = GameSession(config)
    pending = []

    try:
        while True:
            clock.tick(HOST_FPS)
            now = pygame.time.get_ticks()

            events = pygame.event.get()
            for e in events:
                if e.type == pygame.QUIT:
                    return
                if e.type == pygame.KEYDOWN:
                    if e.key == pygame.K_ESCAPE:
                        return
                    if e.key == pygame.K_p:
                        session.toggle_pause(now)
                    if e.key == pygame.K_r:
                        log.info("restart")
                        session = GameSession(config)
                        gate = FrameGate(config.frame_ms)
            # Keep key presses from gated-out callbacks for the next real frame
            pending.extend(events)
            if not gate.ready(now):
                continue

            inputs = keyboard.poll(pending, pygame.key.get_pressed())
            pending.clear()
            session.update(now, inputs)
            render.draw_frame(screen, session.frame())
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)
    run(config_from_args(args))


if __name__ == '__main__':
    main()
