"""Data access: the HYDAT database and the realtime datamart."""
