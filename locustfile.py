from locust import HttpUser, task, between
import random

WORDS = ["tokenizer", "Anti-CD3", "café", "https://example.com/a", "/usr/local/bin", "hello,", "world!"]

STRATEGIES = [
    {"strategy": "unicode"},
    {"strategy": "whitespace", "remove_punctuation": True},
    {"strategy": "edge_ngram", "min_gram": 2, "max_gram": 5},
    {"strategy": "url_email"},
    {"strategy": "unicode", "preserve_patterns": [r"(?i)anti-cd\d+"]},
]


def generate_text():
    word_count = random.randint(10, 200)
    return " ".join(random.choice(WORDS) for _ in range(word_count))


class TokenizeUser(HttpUser):
    wait_time = between(1, 2)

    @task(3)
    def tokenize_text(self):
        self.client.post(
            "/api/tokenize",
            json={"text": generate_text(), "config": random.choice(STRATEGIES)},
        )

    @task
    def tokenize_batch(self):
        texts = [generate_text() for _ in range(random.randint(2, 20))]
        self.client.post("/api/tokenize/batch", json={"texts": texts})
