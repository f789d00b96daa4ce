"""Net radiation at the crop surface."""


def net_radiation(net_shortwave, net_longwave):
    """
    Net radiation: incoming net shortwave minus outgoing net longwave.

    R_n = R_ns - R_nl

    Args:
        net_shortwave: R_ns (MJ/m²/day)
        net_longwave: R_nl (MJ/m²/day)

    Returns:
        Net radiation (MJ/m²/day)
    """
    return net_shortwave - net_longwave


__all__ = ['net_radiation']
