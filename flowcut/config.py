"""Configuration classes for flowcut computations."""

from dataclasses import dataclass


@dataclass
class FlowConfig:
    """Runtime switches for a max-flow/min-cut computation."""

    # Re-check antisymmetry, capacity bounds, conservation and cut duality
    # once the augmentation loop has finished.
    check_invariants: bool = True

    # Report reverse pseudo-flow (negative entries) as zero in rendered output.
    # The signed matrix is always kept on the result.
    clamp_negative_flow: bool = True


# Global configuration instance
FLOW_CONFIG = FlowConfig()
