"""Resource models, job status tracking, operator settings and tar.gz writing for a Kubernetes backup operator."""

__version__ = "0.1.0"