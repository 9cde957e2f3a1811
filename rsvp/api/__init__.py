"""HTTP API for the RSVP reader."""
