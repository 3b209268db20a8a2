from pydantic import BaseModel, ConfigDict, Field


class FinanceInputsEditDTO(BaseModel):
    """A user edit to the finance calculator. Omitted fields are left unchanged.

    Values are raw strings as typed by the user. Out-of-range values are
    clamped and non-numeric values are ignored by the session.
    """

    vehicle_price: str | None = Field(
        default=None,
        description="Vehicle price as decimal string",
        examples=["105900.00"],
    )
    down_payment_amount: str | None = Field(
        default=None,
        description="Down payment amount as decimal string (0..price)",
        examples=["21180.00"],
    )
    down_payment_percentage: str | None = Field(
        default=None,
        description="Down payment as percent of price (0..50)",
        examples=["20"],
    )
    interest_rate: str | None = Field(
        default=None,
        description="Annual interest rate in percent (1..10)",
        examples=["4.5"],
    )
    loan_term_months: str | None = Field(
        default=None,
        description="Loan term in months (12..84, step 12)",
        examples=["60"],
    )
    balloon_amount: str | None = Field(
        default=None,
        description="Balloon lump sum due at term end (balloon product only)",
        examples=["30000.00"],
    )
    residual_value: str | None = Field(
        default=None,
        description="Residual value at lease end (lease product only)",
        examples=["40000.00"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "down_payment_percentage": "25",
                "loan_term_months": "48",
            }
        }
    )


class FinanceInputsDTO(BaseModel):
    """Current finance inputs."""

    vehicle_price: str = Field(examples=["100000.00"])
    down_payment_amount: str = Field(examples=["20000.00"])
    down_payment_percentage: str = Field(examples=["20.00"])
    interest_rate: str = Field(examples=["4.50"])
    loan_term_months: int = Field(examples=[60])
    balloon_amount: str = Field(examples=["0.00"])
    residual_value: str = Field(examples=["0.00"])


class StandardLoanDTO(BaseModel):
    principal: str
    monthly_payment: str
    total_payment: str
    total_interest: str


class BalloonLoanDTO(BaseModel):
    principal: str
    monthly_payment: str
    total_payment: str
    final_lump_sum: str


class LeaseDTO(BaseModel):
    monthly_payment: str
    total_payment: str
    depreciation_component: str
    finance_charge_component: str


class IslamicFinanceDTO(BaseModel):
    title: str
    disclosure: str


class FinanceResultSetDTO(BaseModel):
    """Read-only result set rendered by the presentation layer."""

    vehicle_name: str = Field(description="Display label of the financed vehicle")
    active_product: str = Field(
        description="One of: standard_loan, balloon_payment, lease, islamic_finance",
        examples=["standard_loan"],
    )
    active_product_label: str = Field(examples=["Standard Loan"])

    monthly_payment: str = Field(description="Standard loan monthly payment", examples=["1491.44"])
    total_payment: str = Field(description="Standard loan total cost", examples=["109486.54"])
    total_interest: str = Field(description="Standard loan total interest", examples=["9486.54"])
    balloon_monthly_payment: str = Field(examples=["932.15"])
    lease_monthly_payment: str = Field(examples=["1525.00"])

    standard_loan: StandardLoanDTO
    balloon_loan: BalloonLoanDTO
    lease: LeaseDTO
    islamic_finance: IslamicFinanceDTO

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle_name": "Land Cruiser Hybrid XLE",
                "active_product": "standard_loan",
                "active_product_label": "Standard Loan",
                "monthly_payment": "1491.44",
                "total_payment": "109486.54",
                "total_interest": "9486.54",
                "balloon_monthly_payment": "932.15",
                "lease_monthly_payment": "1525.00",
            }
        }
    )
