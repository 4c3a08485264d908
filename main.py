"""
pygame host for the chax CHIP-8 interpreter
"""

import argparse
import sys

import pygame

from chax import Display, Interpreter, InterpreterConfig, Keypad, read_rom, SCREEN_WIDTH, SCREEN_HEIGHT
from chax.errors import Chip8Error
from chax.logging import get_logger
from chax.rendering import COLOR_SCHEMES

# COSMAC VIP keypad layout on the left of a QWERTY keyboard
#   1 2 3 C        1 2 3 4
#   4 5 6 D   <-   Q W E R
#   7 8 9 E        A S D F
#   A 0 B F        Z X C V
KEY_MAP = {
    pygame.K_1: 0x1, pygame.K_2: 0x2, pygame.K_3: 0x3, pygame.K_4: 0xC,
    pygame.K_q: 0x4, pygame.K_w: 0x5, pygame.K_e: 0x6, pygame.K_r: 0xD,
    pygame.K_a: 0x7, pygame.K_s: 0x8, pygame.K_d: 0x9, pygame.K_f: 0xE,
    pygame.K_z: 0xA, pygame.K_x: 0x0, pygame.K_c: 0xB, pygame.K_v: 0xF,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CHIP-8 interpreter")
    parser.add_argument("rom", help="A compiled CHIP-8 program to load")
    parser.add_argument("--scale", type=int, default=10,
                        help="Window pixels per CHIP-8 pixel")
    parser.add_argument("--color-scheme", default="classic", choices=sorted(COLOR_SCHEMES))
    parser.add_argument("--seed", type=int, default=0,
                        help="Seed for the random number instruction")
    parser.add_argument("--no-throttle", action="store_true",
                        help="Run cycles as fast as possible instead of at 60 Hz")
    parser.add_argument("--debug", action="store_true",
                        help="Enable verbose debug logging")
    return parser


def run_emulator(rom_filename, scale=10, color_scheme="classic", seed=0, throttle=True, debug=False):
    """Main emulator loop. Returns the process exit status."""
    logger = get_logger()
    config = InterpreterConfig(seed=seed, throttle=throttle, log_level="DEBUG" if debug else "INFO")
    interpreter = Interpreter(Display(scale, color_scheme), Keypad(), config)
    try:
        program = read_rom(rom_filename)
        interpreter.load_program(program)
    except Chip8Error as e:
        logger.log_fault(e)
        return 1

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH * scale, SCREEN_HEIGHT * scale))
    pygame.display.set_caption(f"chax - {rom_filename}")

    def blit(frame):
        # frame is (height, width, 3); surfarray wants (width, height, 3)
        pygame.surfarray.blit_array(screen, frame.transpose(1, 0, 2))
        pygame.display.flip()

    interpreter.display.sink = blit

    logger.info("Controls: ESC=Quit, P=Pause, R=Reset")
    running = True
    paused = False
    status = 0

    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_p:
                        paused = not paused
                        logger.info("Paused" if paused else "Resumed")
                    elif event.key == pygame.K_r:
                        interpreter.initialize()
                        interpreter.load_program(program)
                        logger.info("Reset")
                    elif event.key in KEY_MAP:
                        interpreter.set_key_state(KEY_MAP[event.key], True)
                elif event.type == pygame.KEYUP:
                    if event.key in KEY_MAP:
                        interpreter.set_key_state(KEY_MAP[event.key], False)

            if paused:
                pygame.time.wait(50)
                continue

            interpreter.step_cycle()
            interpreter.refresh_display()
    except Chip8Error:
        # already reported by the interpreter
        status = 1
    finally:
        pygame.quit()

    logger.debug(f"Stopped after {interpreter.cycles} cycles at PC 0x{interpreter.pc:03X}")
    return status


def main(argv=None):
    args = build_parser().parse_args(argv)
    return run_emulator(
        args.rom,
        scale=args.scale,
        color_scheme=args.color_scheme,
        seed=args.seed,
        throttle=not args.no_throttle,
        debug=args.debug,
    )


if __name__ == "__main__":
    sys.exit(main())
