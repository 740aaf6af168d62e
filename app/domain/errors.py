# app/domain/errors.py


class CommerceError(Exception):
    """Bazowy blad domeny sklepu."""


class NotFoundError(CommerceError):
    """Koszyk, produkt, sesja albo zamowienie nie istnieje."""


class InvalidInputError(CommerceError):
    pass


class BusinessRuleViolation(CommerceError):
    """Naruszenie reguly biznesowej (stan, stock, wygasniecie)."""


class UnavailableError(BusinessRuleViolation):
    pass


class InvalidStateError(BusinessRuleViolation):
    pass


class SessionExpiredError(BusinessRuleViolation):
    pass
