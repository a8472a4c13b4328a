"""fuzz.py: feeds random input to the parser.

Anything other than an AddressError escaping `parse` is a bug.
"""
import random
import string
import sys

from loguru import logger

from multiserver import AddressError, parse

logger.remove()
logger.add(sys.stderr, level="INFO")
logger.enable("multiserver")

SEED_ADDRESSES = [
    "net:192.168.178.17:8008~shs:HDOUC17/nBPzbVjT3+nUsLf/4p9lyIChEzMAxrHJQo4=",
    "net:FE80:0000:0000:0000:0202:B3FF:FE1E:8329:8008~shs:HDOUC17/nBPzbVjT3+nUsLf/4p9lyIChEzMAxrHJQo4=",
    "net:host.com:8008~shs:HDOUC17/nBPzbVjT3+nUsLf/4p9lyIChEzMAxrHJQo4=",
]
ALPHABET = string.printable + "~:.[]@/+=é☃"


def mutate(rng: random.Random, text: str) -> str:
    """Applies one random insert, delete or replace to `text`."""
    pos = rng.randrange(len(text) + 1)
    action = rng.choice(("insert", "delete", "replace"))
    if action == "insert" or not text:
        return text[:pos] + rng.choice(ALPHABET) + text[pos:]
    pos = min(pos, len(text) - 1)
    if action == "delete":
        return text[:pos] + text[pos + 1:]
    return text[:pos] + rng.choice(ALPHABET) + text[pos + 1:]


def candidates(rng: random.Random, iterations: int):
    for _ in range(iterations):
        if rng.random() < 0.2:
            length = rng.randrange(100)
            yield "".join(rng.choice(ALPHABET) for _ in range(length))
            continue
        text = rng.choice(SEED_ADDRESSES)
        for _ in range(rng.randrange(1, 6)):
            text = mutate(rng, text)
        yield text


def main() -> None:
    """Runs the fuzz loop, stopping at the first unexpected exception."""
    if len(sys.argv) > 3:
        print("usage: [uv run] python fuzz.py [iterations] [seed]")
        exit(1)
    iterations = int(sys.argv[1]) if len(sys.argv) > 1 else 100_000
    seed = int(sys.argv[2]) if len(sys.argv) > 2 else random.randrange(2**32)

    logger.info("fuzzing {} inputs with seed {}", iterations, seed)
    rng = random.Random(seed)
    accepted = rejected = 0
    for text in candidates(rng, iterations):
        try:
            parse(text)
        except AddressError:
            rejected += 1
            continue
        except Exception:
            logger.error("unexpected exception for {!r} (seed {})", text, seed)
            raise
        accepted += 1
    logger.info("done: {} accepted, {} rejected", accepted, rejected)


if __name__ == '__main__':
    main()
