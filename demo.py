import logging
import os
import sys
from dataclasses import dataclass

from rbtree.engine import load_sample
from rbtree.models import TraversalOrder, describe_node, format_tree

logger = logging.getLogger()


@dataclass
class DemoConfig:
    """Demo settings, read from the environment."""

    log_level: str = "INFO"
    sample: int = 2
    search_key: int = 20

    @classmethod
    def from_env(cls) -> "DemoConfig":
        try:
            sample = int(os.environ.get("RBTREE_SAMPLE", cls.sample))
            search_key = int(os.environ.get("RBTREE_SEARCH_KEY", cls.search_key))
        except ValueError as e:
            raise ValueError(f"RBTREE_SAMPLE and RBTREE_SEARCH_KEY must be integers: {e}") from e
        return cls(
            log_level=os.environ.get("LOG_LEVEL", cls.log_level).upper(),
            sample=sample,
            search_key=search_key,
        )


def run(config: DemoConfig) -> list[str]:
    """Build the configured sample tree and return the report lines."""
    tree = load_sample(config.sample)
    logger.debug(f"Built sample {config.sample}: {tree.stats}")

    lines = [f" Pre-Order tree ==> {format_tree(tree, TraversalOrder.PRE)}"]

    node = tree.search(config.search_key)
    if node is not None:
        lines.append(f" Key {config.search_key} was found in the tree.")
        lines.append(describe_node(tree, node))
    else:
        lines.append(f" Key {config.search_key} not found in the tree.")
    return lines


def main() -> int:
    config = DemoConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    print()
    for line in run(config):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
