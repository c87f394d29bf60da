"""Moving grouped files into place and recording the run."""
