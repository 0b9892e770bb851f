def make_patient(**overrides):
    data = {
        'id': 'P-001',
        'name': 'Test Patient',
        'dob': '1990-01-01',
        'gender': 'Male',
        'bloodType': 'O+',
        'department': 'Cardiology',
        'status': 'Stable',
    }
    data.update(overrides)
    return data


def make_appointment(**overrides):
    data = {
        'patientName': 'Michael Brown',
        'date': '2025-06-13',
        'time': '13:00',
        'doctor': 'Dr. Sarah Lee',
        'department': 'General Practice',
        'reason': 'Follow-up',
    }
    data.update(overrides)
    return data


def login(client, username, password):
    return client.post('/api/auth/login', json={'username': username, 'password': password})
