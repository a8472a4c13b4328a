"""bench.py: times parsing of a reference address."""
import sys
import timeit

from loguru import logger

from multiserver import MultiserverAddress, parse

logger.remove()
logger.add(sys.stderr, level="INFO")
logger.enable("multiserver")

EXAMPLE = "net:192.168.178.17:8008~shs:HDOUC17/nBPzbVjT3+nUsLf/4p9lyIChEzMAxrHJQo4="


def get_addr(text: str) -> MultiserverAddress:
    return parse(text)


def main() -> None:
    """Parses EXAMPLE repeatedly and reports the per-call time."""
    if len(sys.argv) > 2:
        print("usage: [uv run] python bench.py [iterations]")
        exit(1)
    iterations = int(sys.argv[1]) if len(sys.argv) == 2 else 100_000

    timer = timeit.Timer(lambda: get_addr(EXAMPLE))
    best = min(timer.repeat(repeat=5, number=iterations))
    print(f"parse address: {best / iterations * 1e6:.3f} us/call "
          f"(best of 5, {iterations} calls each)")


if __name__ == '__main__':
    main()
