"""Front ends that feed input lines into the interpreter."""
