class AlreadyNormalizedError(RuntimeError):
  """Raised when an expression that is itself a normal form is passed where a
  fresh, un-normalized expression is expected."""
