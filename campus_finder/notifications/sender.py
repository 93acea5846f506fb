import requests
from campus_finder.notifications.notifier import DeliveryResult


class ResendEmailSender:
    """Sends one email per call through the Resend HTTP API"""

    def __init__(self, api_key, from_email, api_url):
        self.api_key = api_key
        self.from_email = from_email
        self.api_url = api_url

    def send(self, to, subject, html):
        try:
            response = requests.post(
                self.api_url,
                headers={
                    'Authorization': f'Bearer {self.api_key}',
                    'Content-Type': 'application/json',
                },
                json={
                    'from': self.from_email,
                    'to': to,
                    'subject': subject,
                    'html': html,
                },
            )
        except requests.exceptions.RequestException as e:
            return DeliveryResult(to=to, ok=False, error=str(e))

        if not response.ok:
            return DeliveryResult(to=to, ok=False, error=response.text or f'HTTP {response.status_code}')
        return DeliveryResult(to=to, ok=True)
