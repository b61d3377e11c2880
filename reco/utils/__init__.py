"""Helper modules for reco."""
