# This script is meant to be run once to obtain an OAuth2 access token for the Gmail tools.
# It takes a client secret from a configured OAuth client in GCP and authenticates a specific
# user. The printed access token is what the tools expect as their 'access_token' argument;
# the saved token file also holds the refresh token should a new access token be needed later.

from google_auth_oauthlib.flow import InstalledAppFlow

from gmail_tools.services.gmail import SCOPES

INPUT_CLIENT_SECRET_FILE = "client_secret.json"
OUTPUT_TOKEN_FILE = "token.json"


def main():
    flow = InstalledAppFlow.from_client_secrets_file(INPUT_CLIENT_SECRET_FILE, SCOPES)

    # This will open a browser window for you to log in
    creds = flow.run_local_server(port=0)

    with open(OUTPUT_TOKEN_FILE, "w") as token:
        token.write(creds.to_json())

    print(f"Success! {OUTPUT_TOKEN_FILE} created.")
    print(f"Access token: {creds.token}")


if __name__ == "__main__":
    main()
