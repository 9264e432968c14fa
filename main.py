from __future__ import annotations

from api import Screen, SpiralBehavior, Turtle, TurtleConfig, animate_pattern, run

screen = Screen()

snowflake = animate_pattern(
    screen,
    "koch_snowflake",
    depth=3,
    size=240,
    position=(-260, 70),
    config=TurtleConfig(pen_width=2.0, pen_color="#7FDBFF"),
    interval=0.02,
    auto_reset=True,
    reset_timeout=3.0,
)
dragon = animate_pattern(
    screen,
    "dragon_curve",
    depth=10,
    size=160,
    position=(120, 40),
    config=TurtleConfig.for_mode("logo", pen_color="#FF851B"),
    interval=0.01,
)
spiral = SpiralBehavior(
    Turtle(screen, (0, -180), TurtleConfig(pen_color="#2ECC40")),
    interval=0.03,
    step=1.0,
    growth=0.6,
    angle=91.0,
    max_steps=150,
)


if __name__ == "__main__":
    # 注意: Turtle.clear() は共有 Screen 全体を消すため、リセット時は他の図形も消える
    run(screen, [snowflake, dragon, spiral], width=800, height=600)
