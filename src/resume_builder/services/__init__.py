"""Domain services: draft state, wizard, validation, export and AI advice."""
