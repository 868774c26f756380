"""
Star Position Chart - Main Application

Loads a star catalogue, plots it on a polar chart and runs the
interactive loop (pan, zoom, rotate, hover, magnitude filter).

Phases run strictly in order: catalogue load -> population -> frame loop.
"""

import argparse
import sys
from pathlib import Path

import pygame

from catalogs.catalogue_loader import load_catalogue
from core.config import ChartConfig, PANEL_HEIGHT, TITLE
from core.state_manager import StateManager
from rendering.star_field import StarField
from ui.screen_starchart import StarChartScreen


class StarChartApp:
    """
    Main application

    Owns the window, the chart state and the star field, and drives the
    frame loop.
    """

    def __init__(self, config: ChartConfig):
        self.config = config

        pygame.init()
        self.screen = pygame.display.set_mode(
            (config.canvas_width, config.canvas_height + PANEL_HEIGHT))
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()

        self.state_manager = StateManager(config)
        self.star_field = StarField(config.distance_ceiling)

        records = []
        if config.catalog_path is not None:
            records = load_catalogue(config.catalog_path,
                                     report_malformed=config.report_malformed_rows)
        self.star_field.populate(records, self.state_manager.snapshot(),
                                 config.canvas_size)

        self.chart = StarChartScreen(self.state_manager, self.star_field)
        self.chart.on_enter()

        self.running = True
        print(f"\n{TITLE}")
        print("=" * 60)
        print(f"Canvas: {config.canvas_width}x{config.canvas_height}  "
              f"Stars plotted: {len(self.star_field):,}")
        print("=" * 60)

    def run(self):
        """Main loop"""
        while self.running:
            dt = self.clock.tick(self.config.fps) / 1000.0

            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    self.running = False

            # all input lands in the state manager before the frame reads it
            if self.chart.handle_input(events) == 'QUIT':
                self.running = False

            self.chart.update(dt)
            self.chart.render(self.screen)
            pygame.display.flip()

        self.quit()

    def quit(self):
        print("\nShutting down...")
        if self.chart.is_active():
            self.chart.on_exit()
        pygame.quit()


def parse_args(argv=None) -> ChartConfig:
    ap = argparse.ArgumentParser(description="Interactive 2D star position chart")
    ap.add_argument("catalog", nargs="?", default=str(ChartConfig.catalog_path),
                    help="HYG-style CSV star catalogue")
    ap.add_argument("--width", type=int, default=ChartConfig.canvas_width)
    ap.add_argument("--height", type=int, default=ChartConfig.canvas_height)
    ap.add_argument("--fps", type=int, default=ChartConfig.fps)
    ap.add_argument("--warn-malformed", action="store_true",
                    help="print a warning with the number of rejected catalogue rows")
    args = ap.parse_args(argv)

    return ChartConfig(
        canvas_width=args.width,
        canvas_height=args.height,
        fps=args.fps,
        catalog_path=Path(args.catalog),
        report_malformed_rows=args.warn_malformed,
    )


def main(argv=None):
    """Entry point"""
    try:
        app = StarChartApp(parse_args(argv))
        app.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        pygame.quit()
        sys.exit(0)
    except Exception as e:
        print(f"\n\nFATAL ERROR: {e}")
        import traceback
        traceback.print_exc()
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
