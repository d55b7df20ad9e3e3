"""Errors that abort a daily tips run."""


class FetchError(Exception):
    """Reading tips or a page of users from the store failed.

    Fatal to the run: remaining pages are skipped and the error propagates
    to whatever triggered the job.
    """
