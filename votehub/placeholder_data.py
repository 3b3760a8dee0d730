"""Demo dataset used by the seeder.

Plain dicts keyed by column name, one list per entity. Passwords are in clear
text here and hashed at seed time. Answer rows carry `sh_id` and `q_id`; how
those land in the `answers` columns is decided by `votehub.seed.ANSWER_COLUMN_MAP`.
"""

shareholders = [
    {
        "id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
        "name": "Ada Holder",
        "email": "ada@votehub.local",
        "password": "shareholder123",
    },
    {
        "id": "3958dc9e-742f-4377-85e9-fec4b6a6442a",
        "name": "Brian Stake",
        "email": "brian@votehub.local",
        "password": "shareholder123",
    },
    {
        "id": "3958dc9e-737f-4377-85e9-fec4b6a6442a",
        "name": "Carla Equity",
        "email": "carla@votehub.local",
        "password": "shareholder123",
    },
]

questions = [
    {
        "id": "8b1e3c1a-0f0e-4b6a-9d34-2f6a5c1e7a01",
        "question": "Approve the annual financial statements?",
        "is_active": 1,
    },
    {
        "id": "8b1e3c1a-0f0e-4b6a-9d34-2f6a5c1e7a02",
        "question": "Which dividend policy should the board adopt?",
        "is_active": 1,
    },
    {
        "id": "8b1e3c1a-0f0e-4b6a-9d34-2f6a5c1e7a03",
        "question": "Re-elect the current auditor?",
        "is_active": 0,
    },
]

question_choices = [
    {"id": "c6a0f1d2-1111-4c1e-8f00-000000000001", "question_id": "8b1e3c1a-0f0e-4b6a-9d34-2f6a5c1e7a01", "choice": "Yes"},
    {"id": "c6a0f1d2-1111-4c1e-8f00-000000000002", "question_id": "8b1e3c1a-0f0e-4b6a-9d34-2f6a5c1e7a01", "choice": "No"},
    {"id": "c6a0f1d2-1111-4c1e-8f00-000000000003", "question_id": "8b1e3c1a-0f0e-4b6a-9d34-2f6a5c1e7a01", "choice": "Abstain"},
    {"id": "c6a0f1d2-1111-4c1e-8f00-000000000004", "question_id": "8b1e3c1a-0f0e-4b6a-9d34-2f6a5c1e7a02", "choice": "Keep payout ratio"},
    {"id": "c6a0f1d2-1111-4c1e-8f00-000000000005", "question_id": "8b1e3c1a-0f0e-4b6a-9d34-2f6a5c1e7a02", "choice": "Increase payout ratio"},
    {"id": "c6a0f1d2-1111-4c1e-8f00-000000000006", "question_id": "8b1e3c1a-0f0e-4b6a-9d34-2f6a5c1e7a02", "choice": "Buy back shares instead"},
    {"id": "c6a0f1d2-1111-4c1e-8f00-000000000007", "question_id": "8b1e3c1a-0f0e-4b6a-9d34-2f6a5c1e7a03", "choice": "Yes"},
    {"id": "c6a0f1d2-1111-4c1e-8f00-000000000008", "question_id": "8b1e3c1a-0f0e-4b6a-9d34-2f6a5c1e7a03", "choice": "No"},
]

shareholder_question_answers = [
    {
        "id": "a5d7e9f0-2222-4a1b-9c00-000000000001",
        "sh_id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
        "q_id": "8b1e3c1a-0f0e-4b6a-9d34-2f6a5c1e7a01",
        "choice_id": "c6a0f1d2-1111-4c1e-8f00-000000000001",
    },
    {
        "id": "a5d7e9f0-2222-4a1b-9c00-000000000002",
        "sh_id": "3958dc9e-742f-4377-85e9-fec4b6a6442a",
        "q_id": "8b1e3c1a-0f0e-4b6a-9d34-2f6a5c1e7a01",
        "choice_id": "c6a0f1d2-1111-4c1e-8f00-000000000003",
    },
    {
        "id": "a5d7e9f0-2222-4a1b-9c00-000000000003",
        "sh_id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
        "q_id": "8b1e3c1a-0f0e-4b6a-9d34-2f6a5c1e7a02",
        "choice_id": "c6a0f1d2-1111-4c1e-8f00-000000000005",
    },
]

users = [
    {
        "id": "410544b2-4001-4271-9855-fec4b6a6442a",
        "name": "Demo Admin",
        "email": "admin@votehub.local",
        "password": "admin123",
    },
]

customers = [
    {
        "id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
        "name": "Delba de Oliveira",
        "email": "delba@oliveira.com",
        "image_url": "/customers/delba-de-oliveira.png",
    },
    {
        "id": "3958dc9e-742f-4377-85e9-fec4b6a6442a",
        "name": "Lee Robinson",
        "email": "lee@robinson.com",
        "image_url": "/customers/lee-robinson.png",
    },
    {
        "id": "3958dc9e-737f-4377-85e9-fec4b6a6442a",
        "name": "Hector Simpson",
        "email": "hector@simpson.com",
        "image_url": "/customers/hector-simpson.png",
    },
    {
        "id": "50ca3e18-62cd-11ee-8c99-0242ac120002",
        "name": "Steven Tey",
        "email": "steven@tey.com",
        "image_url": "/customers/steven-tey.png",
    },
]

invoices = [
    {"id": "d1f2a3b4-3333-4e5f-8a00-000000000001", "customer_id": customers[0]["id"], "amount": 15795, "status": "pending", "date": "2022-12-06"},
    {"id": "d1f2a3b4-3333-4e5f-8a00-000000000002", "customer_id": customers[1]["id"], "amount": 20348, "status": "pending", "date": "2022-11-14"},
    {"id": "d1f2a3b4-3333-4e5f-8a00-000000000003", "customer_id": customers[2]["id"], "amount": 3040, "status": "paid", "date": "2022-10-29"},
    {"id": "d1f2a3b4-3333-4e5f-8a00-000000000004", "customer_id": customers[3]["id"], "amount": 44800, "status": "paid", "date": "2023-09-10"},
    {"id": "d1f2a3b4-3333-4e5f-8a00-000000000005", "customer_id": customers[0]["id"], "amount": 34577, "status": "pending", "date": "2023-08-05"},
    {"id": "d1f2a3b4-3333-4e5f-8a00-000000000006", "customer_id": customers[2]["id"], "amount": 54246, "status": "pending", "date": "2023-07-16"},
    {"id": "d1f2a3b4-3333-4e5f-8a00-000000000007", "customer_id": customers[1]["id"], "amount": 666, "status": "pending", "date": "2023-06-27"},
    {"id": "d1f2a3b4-3333-4e5f-8a00-000000000008", "customer_id": customers[3]["id"], "amount": 32545, "status": "paid", "date": "2023-06-09"},
]

revenue = [
    {"month": "Jan", "revenue": 2000},
    {"month": "Feb", "revenue": 1800},
    {"month": "Mar", "revenue": 2200},
    {"month": "Apr", "revenue": 2500},
    {"month": "May", "revenue": 2300},
    {"month": "Jun", "revenue": 3200},
    {"month": "Jul", "revenue": 3500},
    {"month": "Aug", "revenue": 3700},
    {"month": "Sep", "revenue": 2500},
    {"month": "Oct", "revenue": 2800},
    {"month": "Nov", "revenue": 3000},
    {"month": "Dec", "revenue": 4800},
]
