"""Sample discovery transcript used by ``main.py --sample`` and the tests."""

CLAIMS_SYSTEM_TRANSCRIPT = """\
Architect: Thanks for making time today. Can you walk me through where things stand?

CTO (Northwind Mutual Insurance): Sure. Our claims platform is a monolithic on-prem system we built \
about twelve years ago. Everything runs in our own data center - intake, adjudication, payments.

Architect: How reliable has it been?

CTO: That's the problem. When the claims system goes down we lose roughly $50k per hour in downtime \
cost, between missed SLAs and adjusters sitting idle. We had two outages last quarter.

VP Operations: And fraud is getting worse. Our fraud detection is a batch job that runs overnight, so \
by the time we flag a suspicious claim it has often been paid out already.

Architect: What does the data side look like?

CTO: We have a 40TB legacy SQL Server database behind the claims platform. Nobody wants to touch it \
because every schema change breaks something downstream.

CISO: Security-wise, the board wants us moving toward Zero Trust. Right now it's VPN plus a flat \
internal network, and everyone with a login can reach almost everything.

Architect: Any constraints I should know about?

CFO: We need to show results within 6 months, and the new run-rate can't exceed $20k a month in OpEx. \
We are not going to approve a big capital project.

Architect: Understood. If we could pilot one thing first, what would matter most?

VP Operations: Catching fraud before payment. And not falling over every time month-end volume spikes.
"""
