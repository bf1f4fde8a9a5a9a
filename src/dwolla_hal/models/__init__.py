"""Typed Dwolla resources. Each one navigates its own links."""

from .account import Account
from .beneficial_owner import (
    BeneficialOwner,
    BeneficialOwnerRequest,
    BeneficialOwners,
    BeneficialOwnerStatus,
    BeneficialOwnership,
    CertificationStatus,
)
from .business_classification import (
    BusinessClassification,
    BusinessClassifications,
    IndustryClassification,
)
from .common import (
    ACHDetails,
    Addenda,
    AddendaValues,
    Address,
    Amount,
    Clearing,
    MetaData,
    Passport,
    parse_created,
)
from .customer import (
    Controller,
    Customer,
    CustomerRequest,
    Customers,
    CustomerStatus,
    CustomerType,
    IAVToken,
)
from .document import Document, Documents, DocumentStatus, DocumentType
from .event import Event, Events, EventTopic
from .funding_source import (
    BankAccountType,
    FundingSource,
    FundingSourceBalance,
    FundingSourceRequest,
    FundingSources,
    FundingSourceStatus,
    FundingSourceToken,
    FundingSourceType,
    MicroDeposit,
    MicroDepositRequest,
    MicroDepositStatus,
)
from .kba import KBA, KBAAnswer, KBAQuestion, KBAQuestionAnswer, KBARequest
from .mass_payment import (
    MassPayment,
    MassPaymentItem,
    MassPaymentItemRequest,
    MassPaymentItems,
    MassPaymentItemStatus,
    MassPaymentRequest,
    MassPayments,
    MassPaymentStatus,
)
from .on_demand_authorization import OnDemandAuthorization
from .transfer import (
    Transfer,
    TransferFailure,
    TransferFailureCode,
    TransferFees,
    TransferRequest,
    Transfers,
    TransferStatus,
)
from .webhook import Webhook, Webhooks, WebhookSubscription, WebhookSubscriptions

__all__ = [
    # Account
    "Account",
    # Customers
    "Controller",
    "Customer",
    "CustomerRequest",
    "Customers",
    "CustomerStatus",
    "CustomerType",
    "IAVToken",
    # Beneficial owners
    "BeneficialOwner",
    "BeneficialOwnerRequest",
    "BeneficialOwners",
    "BeneficialOwnerStatus",
    "BeneficialOwnership",
    "CertificationStatus",
    # Funding sources
    "BankAccountType",
    "FundingSource",
    "FundingSourceBalance",
    "FundingSourceRequest",
    "FundingSources",
    "FundingSourceStatus",
    "FundingSourceToken",
    "FundingSourceType",
    "MicroDeposit",
    "MicroDepositRequest",
    "MicroDepositStatus",
    # Transfers
    "Transfer",
    "TransferFailure",
    "TransferFailureCode",
    "TransferFees",
    "TransferRequest",
    "Transfers",
    "TransferStatus",
    # Mass payments
    "MassPayment",
    "MassPaymentItem",
    "MassPaymentItemRequest",
    "MassPaymentItems",
    "MassPaymentItemStatus",
    "MassPaymentRequest",
    "MassPayments",
    "MassPaymentStatus",
    # Verification
    "Document",
    "Documents",
    "DocumentStatus",
    "DocumentType",
    "KBA",
    "KBAAnswer",
    "KBAQuestion",
    "KBAQuestionAnswer",
    "KBARequest",
    # Misc
    "BusinessClassification",
    "BusinessClassifications",
    "IndustryClassification",
    "Event",
    "Events",
    "EventTopic",
    "OnDemandAuthorization",
    "Webhook",
    "Webhooks",
    "WebhookSubscription",
    "WebhookSubscriptions",
    # Shared values
    "ACHDetails",
    "Addenda",
    "AddendaValues",
    "Address",
    "Amount",
    "Clearing",
    "MetaData",
    "Passport",
    "parse_created",
]
