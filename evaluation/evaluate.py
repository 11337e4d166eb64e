# evaluation/evaluate.py

import os
import csv
import time
from typing import Dict

import numpy as np

from backend.board import NoSafeRevealError
from backend.config import load_config
from backend.game import GridSession
from backend.utils import encode_board


def survey_generator(
    num_boards: int,
    width: int,
    height: int,
    difficulty: int,
    seed: int = None,
    config: Dict = None,
    verbose: bool = False,
    save_dir: str = None
) -> Dict:
    """
    Generate many grids with the same settings and summarize them:
    mine density, share of the board opened by the first reveal, and how
    often no safe reveal existed.
    """
    os.makedirs(save_dir, exist_ok=True) if save_dir else None
    config = config if config is not None else load_config()

    summary = []
    for i in range(num_boards):
        board_seed = seed + i if seed is not None else None
        session = GridSession(width, height, difficulty, seed=board_seed, config=config)

        try:
            session.generate()
            safe = True
        except NoSafeRevealError:
            safe = False

        encoded = encode_board(session.board.board)
        summary.append({
            "board": i + 1,
            "seed": board_seed,
            "mines": int(np.count_nonzero(encoded == -1)),
            "coverage": session.get_score(),
            "safe": safe,
        })

        if verbose:
            print(f"Board {i + 1}: {summary[-1]['mines']} mines, "
                  f"{'opened ' + format(summary[-1]['coverage'], '.2%') if safe else 'no safe reveal'}")

    mines = np.array([row["mines"] for row in summary], dtype=float)
    coverage = np.array([row["coverage"] for row in summary if row["safe"]], dtype=float)
    failures = sum(1 for row in summary if not row["safe"])

    stats = {
        "boards": num_boards,
        "mean_mines": float(mines.mean()) if num_boards else 0.0,
        "mean_density": float(mines.mean() / (width * height)) if num_boards else 0.0,
        "mean_coverage": float(coverage.mean()) if coverage.size else 0.0,
        "failure_rate": failures / num_boards if num_boards else 0.0,
    }

    print(f"\n{width}x{height} @ {difficulty}% - Density: {stats['mean_density']:.2%}, "
          f"Coverage: {stats['mean_coverage']:.2%}, No safe reveal: {stats['failure_rate']:.2%}")

    if save_dir:
        timestamp = int(time.time())
        with open(f"{save_dir}/summary_{timestamp}.csv", "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=["board", "seed", "mines", "coverage", "safe"])
            writer.writeheader()
            writer.writerows(summary)

    return stats


def survey_difficulties(num_boards: int = 50, seed: int = None, config: Dict = None, save_root: str = None):
    settings = [
        {"width": 9, "height": 9, "difficulty": 12, "label": "easy"},
        {"width": 16, "height": 16, "difficulty": 16, "label": "medium"},
        {"width": 30, "height": 16, "difficulty": 21, "label": "hard"},
    ]
    results = {}
    for setting in settings:
        print(f"\n== Difficulty: {setting['label']} ==")
        results[setting["label"]] = survey_generator(
            num_boards=num_boards,
            width=setting["width"],
            height=setting["height"],
            difficulty=setting["difficulty"],
            seed=seed,
            config=config,
            save_dir=os.path.join(save_root, setting["label"]) if save_root else None,
        )
    return results


if __name__ == "__main__":
    survey_difficulties(num_boards=100, seed=0, save_root="evaluation/logs")
