DOC = {
    "@context": "https://www.w3.org/ns/did/v1",
    "id": "did:example:123",
    "verificationMethod": [
        {
            "id": "did:example:123#key-1",
            "type": "Ed25519VerificationKey2018",
            "controller": "did:example:123",
            "publicKeyBase58": "H3C2AVvLMv6gmMNam3uVAjZpfkcJCwDwnZn6z3wXmqPV",
        },
        {
            "id": "did:example:123#key-2",
            "type": "Ed25519VerificationKey2018",
            "controller": "did:example:123",
            "publicKeyBase58": "4zvwRjXUKGfvwnParsHAS3HuSVzV5cA4McphgmoCtajS",
        },
    ],
    "service": [
        {
            "id": "did:example:123#did-communication",
            "type": "did-communication",
            "serviceEndpoint": "https://agent.partner.example",
        },
        {
            "id": "did:example:123#profile",
            "type": "profile",
            "serviceEndpoint": "https://partner.example/profile",
        },
    ],
}

PROFILE = {
    "@context": ["https://www.w3.org/2018/credentials/v1"],
    "type": ["VerifiablePresentation"],
    "holder": "did:example:123",
    "verifiableCredential": [
        {
            "@context": ["https://www.w3.org/2018/credentials/v1"],
            "type": ["VerifiableCredential", "OrganizationalProfileCredential"],
            "issuer": "did:example:123",
            "credentialSubject": {
                "id": "did:example:123",
                "legalName": "Partner Ltd.",
                "type": "LEGAL_ENTITY",
            },
        }
    ],
    "proof": {
        "type": "Ed25519Signature2018",
        "created": "2021-03-01T10:00:00Z",
        "verificationMethod": "did:example:123#key-1",
        "proofPurpose": "authentication",
        "jws": "eyJhbGciOiJFZERTQSJ9..c2lnbmF0dXJl",
    },
}
