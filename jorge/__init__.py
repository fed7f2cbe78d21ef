"""Jorge: web frontend for the mod_logdb ejabberd message archive."""
