import pytest

from gridsnake.grid import Heading
from gridsnake.snake import Snake


def test_line_trails_behind_heading():
    snake = Snake.line((5, 0), Heading.RIGHT, 6)
    assert snake.cells() == ((5, 0), (4, 0), (3, 0), (2, 0), (1, 0), (0, 0))
    assert snake.head() == (5, 0)


def test_empty_snake_rejected():
    with pytest.raises(ValueError):
        Snake([])


def test_advance_shifts_and_drops_tail():
    snake = Snake([(2, 2), (1, 2), (0, 2)])
    new_head = snake.advance(Heading.DOWN)
    assert new_head == (2, 3)
    assert snake.cells() == ((2, 3), (2, 2), (1, 2))


def test_grow_keeps_tail_on_next_advance_only():
    snake = Snake([(2, 2), (1, 2), (0, 2)])
    snake.grow()
    assert snake.growing
    assert len(snake) == 3  # nothing changes until the snake moves

    snake.advance(Heading.RIGHT)
    assert snake.cells() == ((3, 2), (2, 2), (1, 2), (0, 2))
    assert not snake.growing

    snake.advance(Heading.RIGHT)
    assert len(snake) == 4


def test_body_contains_ignores_head():
    snake = Snake([(1, 1), (1, 2), (2, 2)])
    assert not snake.body_contains((1, 1))
    assert snake.body_contains((2, 2))
    assert (1, 1) in snake


def test_model_tolerates_duplicates():
    # judging self-collision is the game machine's job
    snake = Snake([(1, 1), (2, 1), (2, 2), (1, 2)])
    snake.grow()
    snake.advance(Heading.DOWN)
    assert snake.cells() == ((1, 2), (1, 1), (2, 1), (2, 2), (1, 2))
    assert snake.body_contains(snake.head())
