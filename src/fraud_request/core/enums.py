"""Enumerations used across the request models.

Every value is the lowercase wire name sent to the scoring service.
"""

from enum import Enum


class EventType(str, Enum):
    ACCOUNT_CREATION = "account_creation"
    ACCOUNT_LOGIN = "account_login"
    PURCHASE = "purchase"
    RECURRING_PURCHASE = "recurring_purchase"
    REFERRAL = "referral"
    SURVEY = "survey"


class DeliverySpeed(str, Enum):
    """Shipping speed for the order."""

    SAME_DAY = "same_day"
    OVERNIGHT = "overnight"
    EXPEDITED = "expedited"
    STANDARD = "standard"


class PaymentProcessor(str, Enum):
    """Payment processor used for the transaction."""

    ADYEN = "adyen"
    ALTAPAY = "altapay"
    AMAZON_PAYMENTS = "amazon_payments"
    AUTHORIZENET = "authorizenet"
    BALANCED = "balanced"
    BEANSTREAM = "beanstream"
    BLUEPAY = "bluepay"
    BRAINTREE = "braintree"
    CHASE_PAYMENTECH = "chase_paymentech"
    CIELO = "cielo"
    COLLECTOR = "collector"
    COMPROPAGO = "compropago"
    CONEKTA = "conekta"
    CUENTADIGITAL = "cuentadigital"
    DIBS = "dibs"
    DIGITAL_RIVER = "digital_river"
    ELAVON = "elavon"
    EPAYEVENTS = "epayeventures"
    EWAY = "eway"
    FIRST_DATA = "first_data"
    GLOBAL_PAYMENTS = "global_payments"
    INGENICO = "ingenico"
    INTERNETSECURE = "internetsecure"
    INTUIT_QUICKBOOKS_PAYMENTS = "intuit_quickbooks_payments"
    IUGU = "iugu"
    MASTERCARD_PAYMENT_GATEWAY = "mastercard_payment_gateway"
    MERCADOPAGO = "mercadopago"
    MERCHANT_ESOLUTIONS = "merchant_esolutions"
    MIRJEH = "mirjeh"
    MOLLIE = "mollie"
    MONERIS_SOLUTIONS = "moneris_solutions"
    NMI = "nmi"
    OTHER = "other"
    OPENPAYMX = "openpaymx"
    OPTIMAL_PAYMENTS = "optimal_payments"
    PAYFAST = "payfast"
    PAYGATE = "paygate"
    PAYONE = "payone"
    PAYPAL = "paypal"
    PAYSTATION = "paystation"
    PAYTRACE = "paytrace"
    PAYTRAIL = "paytrail"
    PAYTURE = "payture"
    PAYU = "payu"
    PAYULATAM = "payulatam"
    PINPAYMENTS = "pinpayments"
    PRINCETON_PAYMENT_SOLUTIONS = "princeton_payment_solutions"
    PSIGATE = "psigate"
    QIWI = "qiwi"
    QUICKPAY = "quickpay"
    RAIFFEISEN = "raiffeisen"
    REDE = "rede"
    SAGE_PAY = "sage_pay"
    SIMPLIFY_COMMERCE = "simplify_commerce"
    SKRILL = "skrill"
    SOCKETLABS = "socketlabs"
    SQUARE = "square"
    STRIPE = "stripe"
    TELERECARGAS = "telerecargas"
    TOWAH = "towah"
    USA_EPAY = "usa_epay"
    VANTIV = "vantiv"
    VERAPAY = "verapay"
    VERICHECK = "vericheck"
    VINDICIA = "vindicia"
    VIRTUAL_CARD_SERVICES = "virtual_card_services"
    VME = "vme"
    WIRECARD = "wirecard"
    WORLDPAY = "worldpay"
