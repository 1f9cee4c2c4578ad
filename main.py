# Oddgamma: Odd Clifford Group Gamma Matrices (C) 2026 The Oddgamma Authors
# Licensed under the Apache License, Version 2.0

"""Oddgamma CLI Entry Point.

Builds the big gamma matrices for a signature and reports them:
    python main.py p=2 q=1 normalization=unit print_matrices=true
"""

import hydra
from omegaconf import DictConfig, OmegaConf

from core.antisymmetry import GammaType
from core.device import resolve_device
from core.odd_group import OddCliffordGroup, Signature, format_matrix
from log import get_logger

logger = get_logger(__name__)


def run(cfg: DictConfig) -> OddCliffordGroup:
    """Builds the collection described by *cfg* and logs a summary.

    Args:
        cfg (DictConfig): Needs ``p`` and ``q``; the rest is optional.

    Returns:
        OddCliffordGroup: The built collection.
    """
    signature = Signature(int(cfg.p), int(cfg.get('q', 0)))
    group = OddCliffordGroup(
        signature,
        normalization=cfg.get('normalization', 'commutator'),
        odd_only=bool(cfg.get('odd_only', False)),
        device=resolve_device(cfg.get('device', 'cpu')),
    )

    counts = group.type_counts()
    logger.info("H: %d, L: %d", counts[GammaType.H], counts[GammaType.L])

    if cfg.get('print_matrices', False):
        precision = int(cfg.get('precision', 4))
        for entry in group.entries:
            label = "".join(str(i) for i in entry.indices) or "-"
            kind = entry.kind.value if entry.kind is not None else "-"
            print(f" Gamma {entry.position + 1}: indices {label}, type {kind}")
            print(format_matrix(entry.matrix, precision=precision))
            print()
    return group


@hydra.main(version_base=None, config_path="conf", config_name="config")
def main(cfg: DictConfig):
    """Hydra entry point.

    Args:
        cfg (DictConfig): The plan.
    """
    logger.debug("Config:\n%s", OmegaConf.to_yaml(cfg))
    run(cfg)


if __name__ == "__main__":
    main()
