"""Request plumbing shared by the client and the pagers."""
