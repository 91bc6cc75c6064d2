# phpayroll/payroll/deductions.py

from decimal import Decimal

from phpayroll.utils import money, non_negative

DEFAULT_WORKING_DAYS_PER_MONTH = 22

# --- SSS CONTRIBUTION TABLE (2025) ---
# (salary_min, salary_max, monthly_salary_credit)
SSS_BRACKETS = [
    (Decimal('5000.00'), Decimal('5249.99'), Decimal('5000')),
    (Decimal('5250.00'), Decimal('5749.99'), Decimal('5500')),
    (Decimal('5750.00'), Decimal('6249.99'), Decimal('6000')),
    (Decimal('6250.00'), Decimal('6749.99'), Decimal('6500')),
    (Decimal('6750.00'), Decimal('7249.99'), Decimal('7000')),
    (Decimal('7250.00'), Decimal('7749.99'), Decimal('7500')),
    (Decimal('7750.00'), Decimal('8249.99'), Decimal('8000')),
    (Decimal('8250.00'), Decimal('8749.99'), Decimal('8500')),
    (Decimal('8750.00'), Decimal('9249.99'), Decimal('9000')),
    (Decimal('9250.00'), Decimal('9749.99'), Decimal('9500')),
    (Decimal('9750.00'), Decimal('10249.99'), Decimal('10000')),
    (Decimal('10250.00'), Decimal('10749.99'), Decimal('10500')),
    (Decimal('10750.00'), Decimal('11249.99'), Decimal('11000')),
    (Decimal('11250.00'), Decimal('11749.99'), Decimal('11500')),
    (Decimal('11750.00'), Decimal('12249.99'), Decimal('12000')),
    (Decimal('12250.00'), Decimal('12749.99'), Decimal('12500')),
    (Decimal('12750.00'), Decimal('13249.99'), Decimal('13000')),
    (Decimal('13250.00'), Decimal('13749.99'), Decimal('13500')),
    (Decimal('13750.00'), Decimal('14249.99'), Decimal('14000')),
    (Decimal('14250.00'), Decimal('14749.99'), Decimal('14500')),
    (Decimal('14750.00'), Decimal('15249.99'), Decimal('15000')),
    (Decimal('15250.00'), Decimal('15749.99'), Decimal('15500')),
    (Decimal('15750.00'), Decimal('16249.99'), Decimal('16000')),
    (Decimal('16250.00'), Decimal('16749.99'), Decimal('16500')),
    (Decimal('16750.00'), Decimal('17249.99'), Decimal('17000')),
    (Decimal('17250.00'), Decimal('17749.99'), Decimal('17500')),
    (Decimal('17750.00'), Decimal('18249.99'), Decimal('18000')),
    (Decimal('18250.00'), Decimal('18749.99'), Decimal('18500')),
    (Decimal('18750.00'), Decimal('19249.99'), Decimal('19000')),
    (Decimal('19250.00'), Decimal('19749.99'), Decimal('19500')),
    (Decimal('19750.00'), Decimal('20249.99'), Decimal('20000')),
    (Decimal('20250.00'), Decimal('20749.99'), Decimal('20500')),
    (Decimal('20750.00'), Decimal('21249.99'), Decimal('21000')),
    (Decimal('21250.00'), Decimal('21749.99'), Decimal('21500')),
    (Decimal('21750.00'), Decimal('22249.99'), Decimal('22000')),
    (Decimal('22250.00'), Decimal('22749.99'), Decimal('22500')),
    (Decimal('22750.00'), Decimal('23249.99'), Decimal('23000')),
    (Decimal('23250.00'), Decimal('23749.99'), Decimal('23500')),
    (Decimal('23750.00'), Decimal('24249.99'), Decimal('24000')),
    (Decimal('24250.00'), Decimal('24749.99'), Decimal('24500')),
    (Decimal('24750.00'), Decimal('25249.99'), Decimal('25000')),
    (Decimal('25250.00'), Decimal('25749.99'), Decimal('25500')),
    (Decimal('25750.00'), Decimal('26249.99'), Decimal('26000')),
    (Decimal('26250.00'), Decimal('26749.99'), Decimal('26500')),
    (Decimal('26750.00'), Decimal('27249.99'), Decimal('27000')),
    (Decimal('27250.00'), Decimal('27749.99'), Decimal('27500')),
    (Decimal('27750.00'), Decimal('28249.99'), Decimal('28000')),
    (Decimal('28250.00'), Decimal('28749.99'), Decimal('28500')),
    (Decimal('28750.00'), Decimal('29249.99'), Decimal('29000')),
    (Decimal('29250.00'), Decimal('29749.99'), Decimal('29500')),
    (Decimal('29750.00'), Decimal('30000.00'), Decimal('30000')),
    (Decimal('30000.01'), Decimal('30749.99'), Decimal('30500')),
    (Decimal('30750.00'), Decimal('31499.99'), Decimal('31000')),
    (Decimal('31500.00'), Decimal('32249.99'), Decimal('31500')),
    (Decimal('32250.00'), Decimal('32999.99'), Decimal('32000')),
    (Decimal('33000.00'), Decimal('33749.99'), Decimal('32500')),
    (Decimal('33750.00'), Decimal('34499.99'), Decimal('33000')),
    (Decimal('34500.00'), Decimal('35249.99'), Decimal('33500')),
    (Decimal('35250.00'), Decimal('999999.00'), Decimal('35000')),
]

SSS_MIN_MSC = Decimal('5000')
SSS_MAX_MSC = Decimal('35000')
SSS_EMPLOYEE_RATE = Decimal('0.05')
SSS_EMPLOYER_RATE = Decimal('0.10')
SSS_TOTAL_RATE = Decimal('0.15')

# --- PAG-IBIG (HDMF): flat monthly amount, split 50/50 ---
PAGIBIG_MONTHLY_AMOUNT = Decimal('200.00')

# --- PHILHEALTH: 5% premium, split 50/50 ---
PHILHEALTH_EMPLOYEE_RATE = Decimal('0.025')
PHILHEALTH_EMPLOYER_RATE = Decimal('0.025')
PHILHEALTH_TOTAL_RATE = Decimal('0.05')

# --- WITHHOLDING TAX (BIR TRAIN Law, Monthly) ---
# (bracket_max, excess_over, base_tax, tax_rate_percent); None = no ceiling
TAX_TABLE = [
    (Decimal('20833.00'), Decimal('0.00'), Decimal('0.00'), 0),
    (Decimal('33333.00'), Decimal('20833.00'), Decimal('0.00'), 15),
    (Decimal('66667.00'), Decimal('33333.00'), Decimal('1875.00'), 20),
    (Decimal('166667.00'), Decimal('66667.00'), Decimal('8541.80'), 25),
    (Decimal('666667.00'), Decimal('166667.00'), Decimal('33541.80'), 30),
    (None, Decimal('666667.00'), Decimal('183541.80'), 35),
]


def calculate_monthly_salary(daily_rate, working_days_per_month=DEFAULT_WORKING_DAYS_PER_MONTH):
    return non_negative(daily_rate) * working_days_per_month


def find_sss_msc(monthly_salary):
    """Maps a monthly salary to its SSS monthly salary credit."""
    salary = money(non_negative(monthly_salary))
    if salary > SSS_MAX_MSC:
        return SSS_MAX_MSC
    if salary < SSS_MIN_MSC:
        return SSS_MIN_MSC
    for salary_min, salary_max, msc in SSS_BRACKETS:
        if salary_min <= salary <= salary_max:
            return msc
    return SSS_BRACKETS[0][2]


def calculate_sss(monthly_salary):
    """Calculates SSS shares from the monthly salary credit."""
    msc = find_sss_msc(monthly_salary)
    return {
        'msc': msc,
        'employee_share': money(msc * SSS_EMPLOYEE_RATE),
        'employer_share': money(msc * SSS_EMPLOYER_RATE),
        'total': money(msc * SSS_TOTAL_RATE),
    }


def calculate_pagibig(monthly_salary=None):
    """Pag-IBIG is a flat amount; the salary is accepted for a uniform call signature."""
    return {
        'employee_share': money(PAGIBIG_MONTHLY_AMOUNT / 2),
        'employer_share': money(PAGIBIG_MONTHLY_AMOUNT / 2),
        'total': money(PAGIBIG_MONTHLY_AMOUNT),
    }


def calculate_philhealth(monthly_basic_salary):
    salary = non_negative(monthly_basic_salary)
    return {
        'employee_share': money(salary * PHILHEALTH_EMPLOYEE_RATE),
        'employer_share': money(salary * PHILHEALTH_EMPLOYER_RATE),
        'total': money(salary * PHILHEALTH_TOTAL_RATE),
    }


def calculate_withholding_tax(taxable_income):
    """Calculates withholding tax on monthly taxable income."""
    income = non_negative(taxable_income)
    for bracket_max, excess_over, base_tax, tax_rate_percent in TAX_TABLE:
        if bracket_max is None or income <= bracket_max:
            excess = income - excess_over
            return money(base_tax + excess * Decimal(tax_rate_percent) / 100)


def calculate_all_contributions(daily_rate, working_days_per_month=DEFAULT_WORKING_DAYS_PER_MONTH):
    """
    Monthly government contributions for a daily-rated employee, plus the
    employee shares deducted on each bi-monthly payslip (half of monthly).
    """
    monthly_salary = calculate_monthly_salary(daily_rate, working_days_per_month)
    sss = calculate_sss(monthly_salary)
    pagibig = calculate_pagibig(monthly_salary)
    philhealth = calculate_philhealth(monthly_salary)

    return {
        'monthly_salary': money(monthly_salary),
        'sss': sss,
        'pagibig': pagibig,
        'philhealth': philhealth,
        'bi_monthly': {
            'sss': money(sss['employee_share'] / 2),
            'pagibig': money(pagibig['employee_share'] / 2),
            'philhealth': money(philhealth['employee_share'] / 2),
        },
    }
