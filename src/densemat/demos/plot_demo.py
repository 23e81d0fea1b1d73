# Copyright (c) 2025 Mohammad Ali Javidian
# SPDX-License-Identifier: MIT
#
# This file is part of the densemat project.
# Licensed under the MIT License – see LICENSE in the repo root.
# demos/plot_demo.py
import os

import matplotlib.pyplot as plt

from densemat.core.typedefs import MatrixXd


def random_heatmap(seed: int | None = None, outputs_dir: str = "outputs", n: int = 8) -> str:
    m = MatrixXd.random(n, n, seed=seed)
    print(f"Random {n}x{n}: min={m.min_coeff():.4f}, max={m.max_coeff():.4f}, mean={m.mean():.4f}")

    # --- Plot ---
    os.makedirs(outputs_dir, exist_ok=True)
    plt.figure(figsize=(5, 5))
    plt.imshow(m.to_numpy(), cmap="coolwarm", vmin=-1.0, vmax=1.0)
    plt.colorbar()
    plt.title(f"MatrixXd.random({n}, {n})")
    plt.tight_layout()
    out = os.path.join(outputs_dir, "random_matrix.pdf")
    plt.savefig(out, bbox_inches="tight")
    plt.close()
    print("Saved:", out)
    return out


def main(seed: int | None = None, outputs_dir: str = "outputs") -> str:
    return random_heatmap(seed=seed, outputs_dir=outputs_dir)


if __name__ == "__main__":
    main()
