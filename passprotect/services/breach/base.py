from abc import ABC, abstractmethod

from passprotect.models.breach import BreachRecord, RangeEntry


class BreachProvider(ABC):

    @abstractmethod
    def check_email(self, email: str, scope: str) -> list[BreachRecord]:
        """
        Returns the breaches worth alerting on for this scope:
        verified breaches whose domain equals the scope.
        Never raises; failures resolve to an empty list.
        """
        pass

    @abstractmethod
    def check_password(self, password: str) -> list[RangeEntry]:
        """
        Password must NEVER be stored, logged or sent.
        Uses k-anonymity: only the 5 char digest prefix leaves the process.
        Never raises; failures resolve to an empty list.
        """
        pass
