"""Use cases grouped by the records they act on."""
